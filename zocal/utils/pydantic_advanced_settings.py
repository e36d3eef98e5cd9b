import argparse
from typing import Any, Dict, Optional, Sequence, Tuple, Type

from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


def build_argument_parser(settings_cls: Type[BaseSettings]) -> argparse.ArgumentParser:
    """One ``--<field_name>`` option per settings field, described by the field."""
    parser = argparse.ArgumentParser(
        prog="zocal",
        description=(settings_cls.__doc__ or "").strip() or None,
        allow_abbrev=False,
    )
    for field_name, field in settings_cls.model_fields.items():
        parser.add_argument(
            f"--{field_name}",
            metavar=field_name.upper(),
            help=field.description,
        )
    return parser


class ArgparseSettingsSource(PydanticBaseSettingsSource):
    """
    Reads settings from command-line options.

    Options the settings class does not declare are left for other parsers
    (``--stream_level`` for the logger, the test runner's own flags).
    """

    def __init__(
        self,
        settings_cls: Type[BaseSettings],
        argv: Optional[Sequence[str]] = None,
    ):
        super().__init__(settings_cls)
        self.namespace, self.unknown = build_argument_parser(settings_cls).parse_known_args(argv)

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        return getattr(self.namespace, field_name, None), field_name, False

    def __call__(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, field_name)
            if value is not None:
                values[key] = value
        return values


class CommandLineSettings(BaseSettings):
    """Settings where command-line options outrank the environment and ``.env``."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            ArgparseSettingsSource(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
