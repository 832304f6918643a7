"""Controllers - по одному контроллеру на каждый паттерн."""

from .command_controller import CommandController
from .composite_controller import CompositeController
from .decorator_controller import DecoratorController
from .demo_controller import DemoController
from .factory_controller import FactoryController
from .main_controller import MainController
from .observer_controller import ObserverController
from .singleton_controller import SingletonController
from .strategy_controller import StrategyController

__all__ = [
    'DemoController',
    'CommandController',
    'CompositeController',
    'DecoratorController',
    'FactoryController',
    'ObserverController',
    'SingletonController',
    'StrategyController',
    'MainController'
]
