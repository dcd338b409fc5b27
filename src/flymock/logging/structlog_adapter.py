# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""StructlogAdapter — renders FlyMock's own log events through structlog.

Only the ``flymock`` logger namespace is touched: its level, and one stream
handler whose formatter is a :class:`structlog.stdlib.ProcessorFormatter`.
The root logger and the global structlog configuration of the code under
test are left alone.
"""

from __future__ import annotations

import logging
from typing import IO, Any

import structlog

from flymock.core.config import Config

NAMESPACE = "flymock"


class _FlyMockHandler(logging.StreamHandler):
    """Stream handler owned by a :class:`StructlogAdapter`."""


def get_logger(name: str) -> Any:
    """Return a structlog logger that forwards events to the stdlib logger *name*.

    Key-value pairs travel as ``extra`` on the log record, so any stdlib
    handler (including pytest's ``caplog``) receives them as record
    attributes.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class StructlogAdapter:
    """Logging adapter for the ``flymock`` namespace backed by structlog.

    Reads ``flymock.logging.format`` (``console`` or ``json``) and the
    ``flymock.logging.level`` section, where ``root`` sets the level of the
    ``flymock`` logger and every other key sets the level of the named module
    logger::

        flymock:
          logging:
            format: json
            level:
              root: WARNING
              flymock.mock.builder: DEBUG
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream
        self._root_level: str = "WARNING"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        """Install the handler and levels described by *config*."""
        level_section = dict(config.get_section("flymock.logging.level"))
        self._root_level = str(level_section.pop("root", "WARNING")).upper()
        self._module_levels = {k: str(v).upper() for k, v in level_section.items()}
        self._format = str(config.get("flymock.logging.format", "console")).lower()

        self._install_handler()
        self.set_level(NAMESPACE, self._root_level)
        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str) -> Any:
        """Get a structlog BoundLogger by name."""
        return get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the log level for a specific stdlib logger."""
        log_level = getattr(logging, level.upper(), logging.INFO)
        logging.getLogger(name).setLevel(log_level)

    def reset(self) -> None:
        """Remove the installed handler and every level this adapter set."""
        _remove_handlers(logging.getLogger(NAMESPACE))
        for name in (NAMESPACE, *self._module_levels):
            logging.getLogger(name).setLevel(logging.NOTSET)

    def _install_handler(self) -> None:
        if self._format == "json":
            renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(colors=False)

        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.ExtraAdder(),
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
        handler = _FlyMockHandler(self._stream)
        handler.setFormatter(formatter)

        namespace_logger = logging.getLogger(NAMESPACE)
        _remove_handlers(namespace_logger)
        namespace_logger.addHandler(handler)


def _remove_handlers(namespace_logger: logging.Logger) -> None:
    for handler in list(namespace_logger.handlers):
        if isinstance(handler, _FlyMockHandler):
            namespace_logger.removeHandler(handler)
            handler.close()


def configure_logging(config: Config, stream: IO[str] | None = None) -> StructlogAdapter:
    """Configure FlyMock logging from *config* and return the adapter used."""
    adapter = StructlogAdapter(stream)
    adapter.configure(config)
    return adapter
