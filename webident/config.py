"""Configuration for webident"""

import pathlib

from dynaconf import Dynaconf, Validator

# Validators for webident settings.
_validators = [
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    Validator(
        "logging.parser_level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ),
    # Only trust proxies to rewrite the host when explicitly deployed behind one.
    Validator("web.identity.trust_forwarded_host", is_type_of=bool, must_exist=True),
]

# `root_path` = The root path for Dynaconf, DO NOT CHANGE.
# `envvar_prefix` = Export envvars with `export WEBIDENT_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `production`, `testing` etc.
# `merge_enabled` = Merge nested tables of an environment into the defaults instead of replacing them.
# `env_switcher` = Switch environments by `export WEBIDENT_ENV=production`. Default: `development`.
# `validators` = Define validators for webident settings.

settings = Dynaconf(
    root_path=str(pathlib.Path(__file__).parent),
    envvar_prefix="WEBIDENT",
    settings_files=[
        "configs/default.toml",
        "configs/development.toml",
        "configs/production.toml",
        "configs/testing.toml",
    ],
    environments=True,
    merge_enabled=True,
    env_switcher="WEBIDENT_ENV",
    validators=_validators,
)
