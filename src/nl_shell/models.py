#!/usr/bin/env python

"""
Language model backends.

Every backend answers the same three questions (how to probe the OS, which
command satisfies a request, how to fix a failed command) and returns a bare
command line. An empty string means the request could not be read as a shell
command.
"""

import os
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional

import anthropic
import openai
from openai import OpenAI

from .constants import (
    API_TIMEOUT, ANTHROPIC_MAX_TOKENS, OPENAI_API_KEY_ENV, ANTHROPIC_API_KEY_ENV,
    LOCAL_URL_ENV, DEFAULT_LOCAL_URL, DEFAULT_LOCAL_API_KEY, DEFAULT_CONFIG,
)
from .errors import ModelError
from .logger import logger
from .prompts import build_init_prompt, build_command_prompt, build_correction_prompt

CODE_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?(.*?)\n?```$", re.DOTALL)


class ModelType(Enum):
    GPT4 = "gpt4"
    GPT35 = "gpt35"
    CLAUDE = "claude"
    LOCAL = "local"


def clean_model_reply(reply: Optional[str]) -> str:
    """Reduce a model reply to the bare command line it carries"""
    if not reply:
        return ""

    text = reply.strip()
    match = CODE_FENCE.match(text)
    if match:
        text = match.group(1).strip()

    # Models like to quote the command, as the prompt examples do
    for quote in ('"', '`'):
        if len(text) >= 2 and text[0] == quote and text[-1] == quote:
            text = text[1:-1].strip()
    return join_command_lines(text)


def join_command_lines(text: str) -> str:
    """Fold a multi-line suggestion into one command line.

    Continued lines (trailing backslash, pipe or `&&`/`||`) are joined with a
    space, separate commands with `; `. History entries stay one line each.
    """
    command = ""
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if not command:
            command = line
        elif command.endswith("\\"):
            command = f"{command[:-1].rstrip()} {line}"
        elif command.endswith(("|", "&&", "||", ";")):
            command = f"{command} {line}"
        else:
            command = f"{command}; {line}"
    return command


class Model(ABC):
    """Resolves natural language into a command line for the user's shell"""

    @abstractmethod
    def init_prompt(self, os_probe_output: str) -> str:
        """Command that best describes the OS, given `uname -smr` output"""

    @abstractmethod
    def resolve(self, context, user_input: str) -> str:
        """Command line satisfying *user_input*; the input itself if it already is one"""

    @abstractmethod
    def correct(self, context, user_input: str, command: str, output) -> str:
        """Revised command line after *command* failed with *output*"""


class PromptModel(Model):
    """Model answering each question with a single text completion"""

    backend = "model"

    def __init__(self, model_name: str):
        self.model_name = model_name

    def init_prompt(self, os_probe_output: str) -> str:
        return self._ask(build_init_prompt(os_probe_output))

    def resolve(self, context, user_input: str) -> str:
        return self._ask(build_command_prompt(context, user_input))

    def correct(self, context, user_input: str, command: str, output) -> str:
        return self._ask(build_correction_prompt(context, user_input, command, output))

    def _ask(self, prompt: str) -> str:
        command = clean_model_reply(self._request(prompt))
        logger.log_model_request(self.backend, self.model_name, len(prompt), len(command))
        return command

    @abstractmethod
    def _request(self, prompt: str) -> Optional[str]:
        """Send *prompt* to the backend and return the raw reply text"""


class OpenAIModel(PromptModel):
    backend = "openai"

    def __init__(self, model_name: str, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 timeout: float = API_TIMEOUT, client: Any = None):
        super().__init__(model_name)
        if client is None:
            api_key = api_key or os.environ.get(OPENAI_API_KEY_ENV)
            if not api_key:
                raise ModelError(f"{OPENAI_API_KEY_ENV} is not set")
            client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self.client = client

    def _request(self, prompt: str) -> Optional[str]:
        try:
            response = self.client.chat.completions.create(
                model=self.model_name,
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.OpenAIError as e:
            raise ModelError(f"{self.backend} request failed: {e}") from e

        if not response.choices:
            return ""
        return response.choices[0].message.content


class LocalModel(OpenAIModel):
    """A model on this machine, served by an OpenAI-compatible endpoint (Ollama, llama.cpp server).

    *model_path* is the name the server knows the model by, such as an Ollama tag.
    """

    backend = "local"

    def __init__(self, model_path: str, base_url: str = DEFAULT_LOCAL_URL,
                 api_key: str = DEFAULT_LOCAL_API_KEY, timeout: float = API_TIMEOUT, client: Any = None):
        super().__init__(model_path, api_key=api_key, base_url=base_url, timeout=timeout, client=client)


class AnthropicModel(PromptModel):
    backend = "anthropic"

    def __init__(self, model_name: str, api_key: Optional[str] = None,
                 timeout: float = API_TIMEOUT, client: Any = None):
        super().__init__(model_name)
        if client is None:
            api_key = api_key or os.environ.get(ANTHROPIC_API_KEY_ENV)
            if not api_key:
                raise ModelError(f"{ANTHROPIC_API_KEY_ENV} is not set")
            client = anthropic.Anthropic(api_key=api_key, timeout=timeout)
        self.client = client

    def _request(self, prompt: str) -> Optional[str]:
        try:
            response = self.client.messages.create(
                model=self.model_name,
                max_tokens=ANTHROPIC_MAX_TOKENS,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AnthropicError as e:
            raise ModelError(f"{self.backend} request failed: {e}") from e

        return "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )


def select_model_type(local: Optional[str] = None, gpt35: bool = False, claude: bool = False) -> ModelType:
    """Pick the backend from CLI flags: local path, then GPT-3.5, then Claude, then GPT-4"""
    if local:
        return ModelType.LOCAL
    if gpt35:
        return ModelType.GPT35
    if claude:
        return ModelType.CLAUDE
    return ModelType.GPT4


def build_model(model_type: ModelType, config: Dict[str, Any], local_path: Optional[str] = None) -> Model:
    """Construct the backend for *model_type* from configuration"""
    models_config = config.get("models", {})
    timeout = config.get("settings", {}).get("api_timeout", API_TIMEOUT)

    def model_name(key):
        return models_config.get(key) or DEFAULT_CONFIG["models"][key]

    if model_type is ModelType.LOCAL:
        if not local_path:
            raise ModelError("A local model requires a model path")
        local_config = config.get("local", {})
        base_url = os.environ.get(LOCAL_URL_ENV) or local_config.get("url") or DEFAULT_LOCAL_URL
        api_key = local_config.get("api_key") or DEFAULT_LOCAL_API_KEY
        return LocalModel(local_path, base_url=base_url, api_key=api_key, timeout=timeout)
    if model_type is ModelType.CLAUDE:
        return AnthropicModel(model_name("claude"), timeout=timeout)
    if model_type is ModelType.GPT35:
        return OpenAIModel(model_name("gpt35"), timeout=timeout)
    return OpenAIModel(model_name("gpt4"), timeout=timeout)
