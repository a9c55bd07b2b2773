APP_NAME = "CoolCalc Pro"
APP_DIRNAME = "CoolCalc"
SETTINGS_FILENAME = "settings.json"
__version__ = "1.0.0"
