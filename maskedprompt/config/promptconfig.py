"""
module maskedprompt.config.promptconfig

Contains the definition of the PromptConfig class, a dataclass that represents
a set of maskedprompt configurations
"""

from dataclasses import dataclass
import json
import os
from typing import Any, Dict, Type
import warnings

from dataclasses_json import dataclass_json
import platformdirs

from .. import constants


@dataclass_json
@dataclass
class PromptConfig:
    """
    class PromptConfig

    Dataclass that represents a set of maskedprompt configurations
    """

    version: str
    mask: str
    color: bool

    @staticmethod
    def default_path() -> str:
        """
        Returns the default path that the current user's configuration should be read from

        Args:
            None

        Returns:
            str: The path where the current user's configuration file should be

        Raises:
            Nothing
        """

        return os.path.join(
            platformdirs.user_data_dir(
                appname=constants.APPLICATION_NAME,
                version=constants.APPLICATION_VERSION,
            ),
            "config.json",
        )

    @staticmethod
    def _ensure_file(file_path: str) -> None:
        # first, ensure the directory exists
        if (dir_path := os.path.dirname(file_path)) and not os.path.isdir(dir_path):
            os.makedirs(dir_path)

        # then, create the file if needed
        if not os.path.isfile(file_path):
            PromptConfig.make_default().to_file(file_path)

    @classmethod
    def from_dict(
        cls: Type["PromptConfig"], json_data: Dict[str, Any]
    ) -> "PromptConfig":
        """
        Constructs a PromptConfig instance from the provided json dict

        Args:
            json_data (Dict[str, Any]): The json data from which to construct the
                PromptConfig

        Returns:
            PromptConfig: A PromptConfig instance containing the data from the
                provided dict

        Raises:
            Exception: If the provided dict does not match the expected layout
                of a PromptConfig instance
        """

        return PromptConfig(**json_data)

    @classmethod
    def from_file(cls: Type["PromptConfig"], path: str) -> "PromptConfig | None":
        """
        Constructs a PromptConfig instance from the provided JSON file. A default
        file is written if none exists at the path yet

        Args:
            path (str): The file to read JSON config data from

        Returns:
            PromptConfig | None: A PromptConfig instance containing the data from
                the provided file or None if it could not be read

        Raises:
            Nothing
        """

        # pylint: disable=broad-exception-caught
        try:
            PromptConfig._ensure_file(path)

            with open(path, "r", encoding="utf-8") as config_file:
                return PromptConfig.from_dict(json.loads(config_file.read()))
        except Exception as exc:
            warnings.warn(f"Unable to read config from target path '{path}': {exc}")
            return None

    @staticmethod
    def make_default() -> "PromptConfig":
        """
        Constructs a PromptConfig instance containing the default configuration

        Args:
            None

        Returns:
            PromptConfig: Instance containing default settings

        Raises:
            Nothing
        """

        return PromptConfig(
            version=constants.CONFIG_VERSION,
            mask=constants.S_PASSWORD_MASK,
            color=True,
        )

    def to_file(self: "PromptConfig", output_path: str) -> None:
        """
        Writes this PromptConfig instance to the file with the specified path as
        JSON data.

        Args:
            output_path (str): The path of the file to write the config to

        Returns:
            Nothing

        Raises:
            Exception: If the file was unable to be written to
        """

        with open(output_path, "w", encoding="utf-8") as output_file:
            # pylint: disable=no-member
            print(self.to_json(indent=2, ensure_ascii=False), file=output_file)
