from typing import TypeVar

from singleton_dp.internal.holder import LazyHolder

S = TypeVar("S", bound="Singleton")


class SingletonMeta(type):
    # Паттерн Singleton: на весь процесс создается только один объект класса.
    # Вызов Cls() идет через LazyHolder класса, поэтому прямое создание
    # возвращает тот же объект, а __init__ выполняется один раз.
    # Каждый наследник получает свой LazyHolder, экземпляры не смешиваются.

    def __init__(cls, name, bases, namespace, **kwargs):
        super().__init__(name, bases, namespace, **kwargs)
        cls._holder = LazyHolder(cls._construct, name=cls.__qualname__) if bases else None

    def _construct(cls):
        return super().__call__()

    def __call__(cls):
        holder = cls.__dict__.get("_holder")
        if holder is None:
            raise TypeError(f"{cls.__name__} has no instance of its own, subclass it")
        return holder.get_instance()


class Singleton(metaclass=SingletonMeta):

    @classmethod
    def get_instance(cls: type[S]) -> S:
        return cls()
