from services.config import ConfigService

from .demo_controller import DemoController


class SingletonController(DemoController):
    title = "Singleton"

    def run(self) -> None:
        self.print_header()

        config1 = ConfigService.get_instance()
        config2 = ConfigService.get_instance()

        if config1 is config2:
            print("config1 and config2 are the same instance. Singleton works!")
        else:
            print("Singleton failed, variables contain different instances.")

        print(f"\nInitial API URL: {config1.get('api_url')}")

        # Изменение через config2 видно через config1
        config2.set('api_url', 'https://api.example.com/v2')
        print(f"New API URL from config1: {config1.get('api_url')}")
