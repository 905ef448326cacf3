"""Rule registry with auto-discovery of ClassifierRule subclasses."""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from pathlib import Path
from types import ModuleType
from typing import Iterator

from workout_feed.rules.base import ClassifierRule

logger = logging.getLogger(__name__)


def _concrete_rules(module: ModuleType) -> Iterator[type[ClassifierRule]]:
    """Yield ClassifierRule subclasses defined in *module* itself."""
    for _name, obj in inspect.getmembers(module, inspect.isclass):
        if (
            issubclass(obj, ClassifierRule)
            and obj.__module__ == module.__name__
            and not inspect.isabstract(obj)
        ):
            yield obj


class RuleRegistry:
    """Holds the classifier rules, keyed by rule_id.

    discover_rules() walks the rules/ package tree and instantiates every
    concrete ClassifierRule it finds. A new rule only needs a module under
    rules/include/ or rules/exclude/ and a free RuleStage.
    """

    def __init__(self) -> None:
        self._rules: dict[str, ClassifierRule] = {}

    def __len__(self) -> int:
        return len(self._rules)

    def discover_rules(self) -> None:
        """Import every module below workout_feed.rules and register its rules."""
        import workout_feed.rules as rules_pkg

        search_path = [str(Path(rules_pkg.__file__).parent)]  # type: ignore[arg-type]
        prefix = rules_pkg.__name__ + "."
        for _finder, module_name, _is_pkg in pkgutil.walk_packages(search_path, prefix):
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                logger.warning("Skipping rule module %s: import failed", module_name)
                continue
            for rule_cls in _concrete_rules(module):
                self.register(rule_cls())

        logger.debug("Discovered %d classifier rules", len(self._rules))

    def register(self, rule: ClassifierRule) -> None:
        """Register *rule*; a rule with the same rule_id is replaced."""
        for other in self._rules.values():
            if other.stage == rule.stage and other.rule_id != rule.rule_id:
                logger.warning(
                    "Rules %s and %s share stage %s", other.rule_id, rule.rule_id, rule.stage.name
                )
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> ClassifierRule | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[ClassifierRule]:
        """Rules in evaluation order: by stage, then rule_id."""
        return sorted(self._rules.values(), key=lambda r: (r.stage, r.rule_id))

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules)
