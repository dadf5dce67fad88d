from copy import copy
from pathlib import Path
from typing import Any, Dict, Union

import jinja2
import yaml

DEFAULT_PROMPTS_FILE = Path(__file__).parent / "prompts.yaml"


class PromptManager:
    def __init__(self, file_path: Union[str, Path] = DEFAULT_PROMPTS_FILE) -> None:
        """Load tool and resource texts from a YAML file.

        Args:
            file_path: Path to the YAML file, defaults to the packaged prompts.yaml

        Raises:
            FileNotFoundError: If the prompt file doesn't exist
            yaml.YAMLError: If the YAML file is malformed
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Prompt file not found: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._prompt_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Failed to parse YAML file {file_path}: {e}")

        self._template_cache: Dict[str, jinja2.Template] = {}

    def load_prompt(self, prompt_name: str) -> Union[str, Dict[str, Any]]:
        """Return the raw value (string or mapping) at a dotted key such as ``tools.search.title``.

        Raises:
            ValueError: If the prompt is not found
        """
        value: Any = self._prompt_data
        for key in prompt_name.split("."):
            if not isinstance(value, dict) or key not in value:
                raise ValueError(f"Prompt '{prompt_name}' not found")
            value = value[key]
        return copy(value)

    def render_prompt(self, prompt_name: str, **prompt_args) -> str:
        """Render a prompt template with given parameters.

        Raises:
            ValueError: If the prompt is missing or not a string
            jinja2.TemplateError: If template rendering fails
        """
        prompt_value = self.load_prompt(prompt_name)
        if not isinstance(prompt_value, str):
            raise ValueError(f"Prompt '{prompt_name}' is not a string")

        if prompt_value not in self._template_cache:
            self._template_cache[prompt_value] = jinja2.Template(
                prompt_value, undefined=jinja2.StrictUndefined
            )
        return self._template_cache[prompt_value].render(**prompt_args).strip()
