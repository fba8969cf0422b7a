"""Dynaconf settings for the resource engine.

Values are read, in increasing precedence, from ``resource_engine.json`` in
the working directory (sectioned by environment), a ``.env`` file, and
``RESOURCE_ENGINE_*`` environment variables. The active environment is
selected by ``RESOURCE_ENGINE_ENV``.
"""

from dynaconf import Dynaconf

settings = Dynaconf(
    envvar_prefix="RESOURCE_ENGINE",
    settings_files=["resource_engine.json"],
    environments=True,
    env_switcher="RESOURCE_ENGINE_ENV",
    load_dotenv=True,
)
