"""Configuration model and loaders for prooftext.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Load custom language profiles that extend the built-in registry.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ProoftextConfig`: normalized settings for CLI and library callers.
- `ConfigLoader`: static construction helpers for `ProoftextConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

from loguru import logger
import yaml

from .languages import GLOBAL_TITLE_EXCEPTIONS, Language, LanguageRegistry
from .parsing import normalize_optional_string, parse_permissive_boolean


_DEFAULT_LANGUAGE = "en"
_DEFAULT_LOG_LEVEL = "INFO"
_SUPPORTED_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"})


@dataclass(slots=True)
class ProoftextConfig:
    """Runtime configuration.

    Attributes:
        default_language: Language code used when callers do not pass one.
        log_level: Minimum `loguru` level for CLI output.
        languages: Custom language profiles keyed by code; they replace
            built-ins with the same code.
    """

    default_language: str = _DEFAULT_LANGUAGE
    log_level: str = _DEFAULT_LOG_LEVEL
    languages: dict[str, Language] = field(default_factory=dict)

    def validate(self) -> None:
        """Validate configuration values before use."""

        if normalize_optional_string(self.default_language) is None:
            raise ValueError("`default_language` must be a non-empty language code.")
        if self.default_language not in self.registry():
            raise ValueError(f"`default_language` `{self.default_language}` is not a known language.")
        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            levels = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(f"`log_level` must be one of: {levels}.")

    def registry(self) -> LanguageRegistry:
        """Return a registry of built-in languages plus configured profiles."""

        registry = LanguageRegistry()
        for language in self.languages.values():
            registry.register(language)
        return registry

    def language(self, code: str | None = None) -> Language:
        """Return the language for `code`, or the default language."""

        return self.registry().get(code or self.default_language)


class ConfigLoader:
    """Factory methods for loading `ProoftextConfig` from files and environment."""

    _SUPPORTED_YAML_KEYS = frozenset({"default_language", "log_level", "languages"})
    _SUPPORTED_LANGUAGE_KEYS = frozenset(
        {
            "name",
            "uppercase_overrides",
            "id_transliterations",
            "title_exceptions",
            "space_before_punctuation",
            "uses_word_spacing",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> ProoftextConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        config = ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")
        logger.debug(
            "Loaded config from {} with {} custom language(s)", path, len(config.languages)
        )
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ProoftextConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        default_language = (
            normalize_optional_string(env_map.get("PROOFTEXT_DEFAULT_LANGUAGE"))
            or _DEFAULT_LANGUAGE
        )
        log_level = (
            normalize_optional_string(env_map.get("PROOFTEXT_LOG_LEVEL")) or _DEFAULT_LOG_LEVEL
        )
        config = ProoftextConfig(
            default_language=default_language.lower(),
            log_level=log_level.upper(),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> ProoftextConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        default_language = (
            normalize_optional_string(payload.get("default_language")) or _DEFAULT_LANGUAGE
        )
        log_level = normalize_optional_string(payload.get("log_level")) or _DEFAULT_LOG_LEVEL

        raw_languages = payload.get("languages") or {}
        if not isinstance(raw_languages, Mapping):
            raise ValueError(f"{source_label} field `languages` must be a mapping/object.")
        languages: dict[str, Language] = {}
        for raw_code, raw_profile in raw_languages.items():
            code = normalize_optional_string(raw_code)
            if code is None:
                raise ValueError(f"{source_label} field `languages` contains a blank code.")
            languages[code.lower()] = ConfigLoader._build_language(
                code.lower(), raw_profile or {}, f"{source_label} language `{code}`"
            )

        config = ProoftextConfig(
            default_language=default_language.lower(),
            log_level=log_level.upper(),
            languages=languages,
        )
        config.validate()
        return config

    @staticmethod
    def _build_language(code: str, profile: Any, source_label: str) -> Language:
        """Build one `Language` from a profile mapping."""

        if not isinstance(profile, Mapping):
            raise ValueError(f"{source_label} must be a mapping/object.")
        unknown = sorted(set(profile).difference(ConfigLoader._SUPPORTED_LANGUAGE_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        title_exceptions = (
            ConfigLoader._string_set(profile, "title_exceptions", source_label)
            if "title_exceptions" in profile
            else GLOBAL_TITLE_EXCEPTIONS
        )
        uses_word_spacing = True
        if "uses_word_spacing" in profile:
            parsed = parse_permissive_boolean(profile["uses_word_spacing"])
            if parsed is None:
                raise ValueError(
                    f"{source_label} field `uses_word_spacing` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            uses_word_spacing = parsed

        return Language(
            code=code,
            name=normalize_optional_string(profile.get("name")) or code,
            uppercase_overrides=ConfigLoader._char_map(
                profile, "uppercase_overrides", source_label
            ),
            id_transliterations=ConfigLoader._char_map(
                profile, "id_transliterations", source_label
            ),
            title_exceptions=frozenset(word.lower() for word in title_exceptions),
            space_before_punctuation=ConfigLoader._string_set(
                profile, "space_before_punctuation", source_label
            ),
            uses_word_spacing=uses_word_spacing,
        )

    @staticmethod
    def _char_map(profile: Mapping[str, Any], key: str, source_label: str) -> dict[str, str]:
        """Read an optional mapping from single characters to replacement strings."""

        raw = profile.get(key)
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        normalized: dict[str, str] = {}
        for raw_key, raw_value in raw.items():
            if not isinstance(raw_key, str) or len(raw_key) != 1:
                raise ValueError(
                    f"{source_label} field `{key}` keys must be single characters, got `{raw_key}`."
                )
            if not isinstance(raw_value, str):
                raise ValueError(f"{source_label} field `{key}` value for `{raw_key}` must be text.")
            normalized[raw_key] = raw_value
        return normalized

    @staticmethod
    def _string_set(profile: Mapping[str, Any], key: str, source_label: str) -> frozenset[str]:
        """Read an optional list of non-empty strings as a frozenset."""

        raw = profile.get(key)
        if raw is None:
            return frozenset()
        if isinstance(raw, str) or not isinstance(raw, (list, tuple, set, frozenset)):
            raise ValueError(f"{source_label} field `{key}` must be a list.")

        values: set[str] = set()
        for item in raw:
            value = normalize_optional_string(item)
            if value is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank entry.")
            values.add(value)
        return frozenset(values)
