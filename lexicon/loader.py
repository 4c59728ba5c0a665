import logging
import os
from dataclasses import dataclass, field

import yaml
from dotenv import load_dotenv

from lexicon.errors import CatalogError, TemplateError
from lexicon.grammar import GrammarCatalog
from lexicon.world import GameObject, WorldCatalog

logger = logging.getLogger(__name__)

# --- CONFIGURATION ---
CATALOG_BASE_PATH = "data/catalogs"
DEFAULT_CATALOG_ID = "house"
CONFIG_PATH = "config.yaml"

DEFAULT_CONFIG_YAML = """
# LORE-LEXICON CONFIGURATION
# --------------------------
# catalog_id picks a folder under catalog_path holding
# manifest.yaml, world.yaml and grammar.yaml.
# strict_kinds: refuse to load a grammar whose slots name kinds
# that no world object has (otherwise they are only logged).

catalog_id: house
catalog_path: data/catalogs
debug_mode: false
strict_kinds: false
log_level: WARNING
"""

# Environment overrides (.env is honoured)
ENV_OVERRIDES = {
    "LEXICON_CATALOG": "catalog_id",
    "LEXICON_LOG_LEVEL": "log_level",
}


@dataclass(frozen=True)
class Catalog:
    """Everything one catalog folder holds, ready to hand to CommandAnalyzer."""
    world: WorldCatalog
    grammar: GrammarCatalog
    manifest: dict = field(default_factory=dict)

    @property
    def title(self):
        return self.manifest.get('title', 'Untitled Catalog')


def load_config(config_path=CONFIG_PATH):
    """
    Loads config.yaml or creates default if missing.
    Values from the environment (or a .env file) win over the file.
    """
    if not os.path.exists(config_path):
        with open(config_path, "w") as f:
            f.write(DEFAULT_CONFIG_YAML.strip() + "\n")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    load_dotenv()
    for env_key, config_key in ENV_OVERRIDES.items():
        value = os.getenv(env_key)
        if value:
            config[config_key] = value

    return config


def save_config(config, config_path=CONFIG_PATH):
    with open(config_path, "w") as f:
        yaml.dump(config, f, default_flow_style=False)


def _read_yaml(path):
    with open(path, "r") as f:
        return yaml.safe_load(f)


def parse_world(entries):
    """
    Input: [{"description": "small tree frog", "kind": "item"}, ...]
    """
    if not isinstance(entries, list):
        raise CatalogError("world.yaml must hold a list of objects.")

    objects = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict) or 'description' not in entry or 'kind' not in entry:
            raise CatalogError(f"World entry #{i + 1} needs 'description' and 'kind': {entry!r}")
        # YAML turns bare on/yes/null into booleans and None; those must be quoted
        for key in ('description', 'kind'):
            if not isinstance(entry[key], str):
                raise CatalogError(f"World entry #{i + 1} has a non-text {key} {entry[key]!r}; quote it in world.yaml")
        objects.append(GameObject.from_text(entry['description'], entry['kind']))
    return WorldCatalog(objects)


def parse_grammar(entries):
    """
    Input: ["look", "put {item} in {container}", ...]
    """
    if not isinstance(entries, list):
        raise CatalogError("grammar.yaml must hold a list of template strings.")

    for i, entry in enumerate(entries):
        if not isinstance(entry, str):
            raise CatalogError(f"Grammar entry #{i + 1} is not text: {entry!r}; quote it in grammar.yaml")

    try:
        return GrammarCatalog(entries)
    except TemplateError as e:
        raise CatalogError(str(e)) from e


def check_consistency(world, grammar):
    """Returns the slot kinds the grammar asks for that no world object has."""
    world_kinds = set(world.kinds())
    missing = set()
    for template in grammar.all_templates():
        for slot in template.slots:
            if slot.kind not in world_kinds:
                missing.add(slot.kind)
    return sorted(missing)


def load_catalog(catalog_id=DEFAULT_CATALOG_ID, base_path=CATALOG_BASE_PATH, strict_kinds=False):
    """
    Loads and merges the YAML files for a given catalog ID.
    The manifest is optional; world and grammar are not.
    """
    catalog_path = os.path.join(base_path, catalog_id)

    manifest = {}
    manifest_path = os.path.join(catalog_path, "manifest.yaml")
    if os.path.exists(manifest_path):
        manifest = _read_yaml(manifest_path) or {}

    world = parse_world(_read_yaml(os.path.join(catalog_path, "world.yaml")))
    grammar = parse_grammar(_read_yaml(os.path.join(catalog_path, "grammar.yaml")))

    missing = check_consistency(world, grammar)
    for kind in missing:
        logger.warning("Grammar slot kind '%s' has no world objects; its templates can never match.", kind)
    if missing and strict_kinds:
        raise CatalogError(f"Grammar uses kinds missing from the world: {', '.join(missing)}")

    logger.debug("Loaded catalog '%s': %d objects, %d templates", catalog_id, len(world), len(grammar))
    return Catalog(world, grammar, manifest)
