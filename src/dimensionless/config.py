"""
Configuration
=============
Application identity and settings keys.

Exports:
    ORG_ID, APP_ID: Identity used by QSettings to locate the preference file.
    SETTINGS_THEME_KEY, SETTINGS_LANGUAGE_KEY: Keys of the two stored preferences.

Stylesheets are package data under dimensionless/resources/themes and are
loaded through importlib.resources (see view/theme.py).
"""

ORG_ID = "dimensionless"
ORG_DOMAIN = "dimensionless.local"
APP_ID = "dimensionless-calculator"

SETTINGS_THEME_KEY = "ui/theme"
SETTINGS_LANGUAGE_KEY = "ui/language"
