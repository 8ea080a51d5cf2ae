from .configuration import LegacyConfigurationError as LegacyConfigurationError
from .selector import SelectorInstantiationError as SelectorInstantiationError
