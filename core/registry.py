# core/registry.py
"""
    Name -> provider lookup.

    The built-in providers are registered up front. A user extension file
    (PF_SOURCE) can add new names or replace built-in ones before the run
    starts: every top-level callable called get_<name> is registered as
    provider <name>, and a top-level register(registry) function, if any,
    is called with the registry.
"""
from __future__ import annotations
import importlib.util
import logging
from pathlib import Path
from typing import Iterable, Optional

from collectors import providers
from core.models import Provider

logger = logging.getLogger(__name__)

PROVIDER_PREFIX = "get_"

BUILTIN_PROVIDERS: dict[str, Provider] = {
    "os": providers.get_os,
    "kernel": providers.get_kernel,
    "host": providers.get_host,
    "uptime": providers.get_uptime,
    "pkgs": providers.get_pkgs,
    "memory": providers.get_memory,
    "de": providers.get_de,
    "shell": providers.get_shell,
    "editor": providers.get_editor,
    "palette": providers.get_palette,
}

DEFAULT_ORDER: tuple[str, ...] = ("os", "host", "kernel", "uptime", "pkgs", "memory")


class ProviderRegistry:
    def __init__(self, entries: Optional[dict[str, Provider]] = None):
        self._providers: dict[str, Provider] = dict(BUILTIN_PROVIDERS if entries is None else entries)

    def register(self, name: str, provider: Provider) -> None:
        if not callable(provider):
            raise TypeError(f"provider {name!r} is not callable")
        if name in self._providers:
            logger.debug("provider %r replaced", name)
        self._providers[name] = provider

    def get(self, name: str) -> Optional[Provider]:
        return self._providers.get(name)

    def names(self) -> list[str]:
        return list(self._providers)

    def __contains__(self, name: str) -> bool:
        return name in self._providers

    def register_from(self, namespace: dict) -> list[str]:
        """Register every callable get_<name> found in `namespace`."""
        added = []
        for attr, value in namespace.items():
            name = attr[len(PROVIDER_PREFIX):]
            if attr.startswith(PROVIDER_PREFIX) and name and callable(value):
                self.register(name, value)
                added.append(name)
        return added

    def load_extension(self, path: str | Path) -> list[str]:
        """
        Execute the Python file at `path` and register the providers it
        defines. A missing or broken file is logged and leaves the registry
        untouched; it never stops the run.
        """
        path = Path(path).expanduser()
        if not path.is_file():
            logger.debug("extension %s not found", path)
            return []

        spec = importlib.util.spec_from_file_location(f"hostfetch_ext_{path.stem}", path)
        if spec is None or spec.loader is None:
            logger.debug("extension %s cannot be loaded", path)
            return []

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
            added = self.register_from(vars(module))
            hook = getattr(module, "register", None)
            if callable(hook):
                hook(self)
        except Exception as e:
            logger.debug("extension %s failed to load: %s", path, e, exc_info=True)
            return []

        logger.debug("extension %s registered %s", path, added)
        return added


def resolve_order(info: Optional[Iterable[str]] = None) -> list[str]:
    """The user's PF_INFO list when given, else the default order."""
    return list(info) if info is not None else list(DEFAULT_ORDER)
