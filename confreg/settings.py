import os

TRUTHY_VALUES = {'1', 'true', 'yes', 'on'}


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in TRUTHY_VALUES


class Config:
	"""
	confreg package settings.
	All settings can be overridden via environment variables.

	Environment Variables:
	----------------------
	LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
	JSON_LOGS: Render log records as JSON instead of console output. Default: false
	CONFREG_DEBUG: Force DEBUG logging. Default: false
	CONFREG_INI_PATH: Backing file used by `create_ini_registry`. Default: settings.ini
	"""
	LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()  # Default to INFO if not set
	JSON_LOGS = _env_flag('JSON_LOGS')
	DEBUG = _env_flag('CONFREG_DEBUG')

	INI_PATH = os.getenv('CONFREG_INI_PATH', 'settings.ini')
