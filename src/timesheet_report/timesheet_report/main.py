from __future__ import annotations

import importlib
import sys

from dotenv import load_dotenv

from config import get_settings_module

from .container import build_container
from .core.constants import LOG_PREFIX
from .core.exceptions import ConfigurationError, ReportWriteError
from .pipeline.service import PipelineResult


def run() -> PipelineResult:
    load_dotenv(override=False)

    try:
        settings_module = get_settings_module()
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
    settings = importlib.import_module(settings_module)

    container = build_container(settings)

    if getattr(settings, "DEBUG", False):
        print(f"{LOG_PREFIX} settings={settings_module} source={container.entry_source.host}")

    return container.pipeline.run()


def main() -> int:
    try:
        run()
    except (ConfigurationError, ReportWriteError) as e:
        print(f"{LOG_PREFIX} {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
