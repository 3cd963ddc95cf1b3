from singleton_dp.internal.singleton import Singleton


class Greeter(Singleton):
    message: str = "Hello from Singleton!"

    def show_message(self) -> None:
        print(f"{self.message}\n")
