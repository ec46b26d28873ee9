"""Feature-level fixtures for i18n system tests.

Provides resource directories and registries for resolution and session
scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import JSONTranslationLoader, YAMLTranslationLoader
from tests.factories.i18n import make_locale_registry


@pytest.fixture
def temp_yaml_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - ar.yml
    - portal.ar.yml
    - en.yml
    """
    yaml_dir = tmp_path / "yaml_locales"
    yaml_dir.mkdir()

    with open(yaml_dir / "ar.yml", "w", encoding="utf-8") as f:
        yaml.dump({"app": {"installApp": "تثبيت"}}, f, allow_unicode=True)

    with open(yaml_dir / "portal.ar.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"app": {"welcome": "مرحباً {name}"}, "pp": {"greeting": "أهلاً"}},
            f,
            allow_unicode=True,
        )

    with open(yaml_dir / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"app": {"installApp": "Install"}}, f)

    return yaml_dir


@pytest.fixture
def json_loader(json_locales_dir):
    """JSONTranslationLoader without caching."""
    return JSONTranslationLoader(json_locales_dir, use_cache=False)


@pytest.fixture
def yaml_loader(temp_yaml_dir):
    """YAMLTranslationLoader without caching."""
    return YAMLTranslationLoader(temp_yaml_dir, use_cache=False)


@pytest.fixture
def registry():
    """Registry with ar, en and an empty pseudo locale."""
    return make_locale_registry()


@pytest.fixture
def scenario_registry():
    """The minimal registry used by the end-to-end scenario."""
    return make_locale_registry(
        {"ar": {"app": {"installApp": "تثبيت"}}, "pseudo": {}}
    )
