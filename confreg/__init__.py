from confreg.settings import Config
from confreg.logger import init_logger
from confreg.config import (
    ConfigurationItem, ConfigurationItemContainer, StaticItemContainer, ConfigRegistry,
    IniConfigProvider, EnvConfigProvider, RuntimeConfigProvider, create_ini_registry
)

# Initialize logger
logger = init_logger(Config)
