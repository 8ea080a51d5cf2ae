import os
from typing import Any

from dotenv import dotenv_values

from .env import Env


def load_env(env_file: str | None = None, override: Env | None = None) -> Env:
    """
    Resolve client settings.

    Later sources win: Env defaults, then the process environment, then
    ``env_file`` (``.env`` in the working directory when omitted), then
    the fields explicitly set on ``override``. Raw string values are
    coerced through ``Env.types_map()`` before validation.
    """
    envars = Env.types_map()

    if env_file is None:
        env_file = ".env"

    raw_values: dict[str, str] = {
        name: value
        for name in envars
        if (value := os.getenv(name))
    }

    if os.path.exists(env_file):
        raw_values.update({
            name: value
            for name, value in dotenv_values(dotenv_path=env_file).items()
            if name in envars and value
        })

    values: dict[str, Any] = {
        name: envars[name](value) for name, value in raw_values.items()
    }

    if override is not None:
        values.update(override.model_dump(exclude_unset=True))

    return Env(**values)
