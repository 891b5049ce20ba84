# config_manager.py
import json
import logging
import os
from pathlib import Path

from . import error as E

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "decimal_places": 10,
    "show_error_details": False,
    "debug": False,
    "input_guard": False,
}


def config_path():
    """Settings file location; ARITHMETIC_ENGINE_CONFIG overrides the project default."""
    override = os.environ.get("ARITHMETIC_ENGINE_CONFIG")
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "config.json"


def coerce_settings(settings_dict):
    """Normalize values a hand-edited file may carry with the wrong type."""
    try:
        settings_dict["decimal_places"] = max(int(settings_dict["decimal_places"]), 0)
    except (TypeError, ValueError, OverflowError):
        logger.warning("%s decimal_places=%r", E.ERROR_MESSAGES["5002"], settings_dict["decimal_places"])
        settings_dict["decimal_places"] = DEFAULT_SETTINGS["decimal_places"]
    return settings_dict


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    try:
        with open(config_path(), 'r', encoding= 'utf-8') as f:
            loaded = json.load(f)

    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", config_path())
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        logger.warning("%s %s", E.ERROR_MESSAGES["5001"], e)
    else:
        if isinstance(loaded, dict):
            settings_dict.update(loaded)
        else:
            logger.warning("%s Expected an object, got %s", E.ERROR_MESSAGES["5001"], type(loaded).__name__)

    coerce_settings(settings_dict)


    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def save_setting(settings_dict):
    try:
        with open (config_path(), 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError as e:
        logger.warning("Settings could not be saved: %s", e)
        return{}
