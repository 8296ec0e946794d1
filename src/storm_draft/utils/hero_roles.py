"""Hero role lookup backed by the bundled knowledge files."""
import json
import logging
from pathlib import Path
from typing import Optional

from storm_draft.models.hero import HeroIdentity, Role
from storm_draft.utils.role_normalizer import normalize_role

logger = logging.getLogger(__name__)

DEFAULT_KNOWLEDGE_DIR = Path(__file__).parents[1] / "knowledge"


class HeroCatalog:
    """Read-only hero name -> role table."""

    def __init__(self, knowledge_dir: Optional[Path] = None):
        if knowledge_dir is None:
            knowledge_dir = DEFAULT_KNOWLEDGE_DIR
        self.knowledge_dir = knowledge_dir
        self._roles: dict[str, Role] = {}
        self._load_data()

    def _load_data(self):
        """Load hero roles from hero_roles.json."""
        path = self.knowledge_dir / "hero_roles.json"
        if not path.exists():
            logger.warning(f"hero_roles.json not found at {path}")
            return
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load hero_roles.json: {e}")
            return

        for name, role in data.get("heroes", {}).items():
            normalized = normalize_role(role)
            if normalized is Role.UNKNOWN:
                logger.warning(f"Unrecognized role {role!r} for hero {name!r}")
            self._roles[name] = normalized

    def role_of(self, hero_name: str) -> Role:
        """Get a hero's role, `Role.UNKNOWN` for unrecognized names."""
        return self._roles.get(hero_name, Role.UNKNOWN)

    def is_known(self, hero_name: str) -> bool:
        return hero_name in self._roles

    def all_known_heroes(self) -> list[str]:
        """All hero names, sorted."""
        return sorted(self._roles)

    def heroes_with_role(self, role: Role) -> list[str]:
        return sorted(name for name, r in self._roles.items() if r is role)

    def identities(self) -> list[HeroIdentity]:
        return [HeroIdentity(name, self._roles[name]) for name in self.all_known_heroes()]


# Module-level convenience function
_default_catalog: Optional[HeroCatalog] = None


def get_default_catalog() -> HeroCatalog:
    """Shared catalog over the bundled knowledge files."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = HeroCatalog()
    return _default_catalog


def get_hero_role(hero_name: str) -> Role:
    """Get a hero's role using the default catalog."""
    return get_default_catalog().role_of(hero_name)
