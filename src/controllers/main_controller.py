from typing import Dict, Iterable, List, Optional, Type

from models.config.app_settings import AppSettings
from services.serialization import get_settings_manager

from .command_controller import CommandController
from .composite_controller import CompositeController
from .decorator_controller import DecoratorController
from .demo_controller import DemoController
from .factory_controller import FactoryController
from .observer_controller import ObserverController
from .singleton_controller import SingletonController
from .strategy_controller import StrategyController


class MainController:
    """Главный контроллер: запускает демонстрации по имени."""

    DEMOS: Dict[str, Type[DemoController]] = {
        'command': CommandController,
        'composite': CompositeController,
        'decorator': DecoratorController,
        'factory': FactoryController,
        'observer': ObserverController,
        'singleton': SingletonController,
        'strategy': StrategyController,
    }

    def __init__(self, settings: Optional[AppSettings] = None):
        self.settings = settings or get_settings_manager().load_or_default()

    def available_demos(self) -> List[str]:
        return list(self.DEMOS)

    def create_demo(self, name: str) -> DemoController:
        """Создать контроллер демонстрации. Raises KeyError for unknown names."""
        return self.DEMOS[name.lower()](self.settings)

    def run(self, names: Optional[Iterable[str]] = None) -> bool:
        """Run the named demos, or all of them. Returns False if a name is unknown."""
        names = list(names) if names else self.available_demos()

        unknown = [name for name in names if name.lower() not in self.DEMOS]
        if unknown:
            print(f"Unknown pattern(s): {', '.join(unknown)}. "
                  f"Available: {', '.join(self.available_demos())}")
            return False

        for index, name in enumerate(names):
            if index:
                print("\n" + "-" * self.settings.separator_width + "\n")
            self.create_demo(name).run()
        return True
