import logging
import os

from llama_cpp import Llama

from sanskrit_agent.config import LLM_CONTEXT_WINDOW, LLM_MAX_NEW_TOKENS, LLM_TEMPERATURE, MODEL_PATH
from sanskrit_agent.errors import ModelServiceError

logger = logging.getLogger(__name__)


class QwenLocalLLM:
    def __init__(self, model_path: str = MODEL_PATH, n_ctx: int = LLM_CONTEXT_WINDOW):
        logger.info("Loading GGUF model from: %s", model_path)

        if not os.path.exists(model_path):
            raise ModelServiceError(f"model file not found at {model_path}")

        try:
            self.llm = Llama(
                model_path=model_path,
                n_gpu_layers=-1,      # offload all layers when a GPU is available
                n_ctx=n_ctx,          # the word breakdown JSON for a long verse needs room
                n_batch=512,
                verbose=False,
                chat_format="chatml"
            )
        except Exception as e:
            raise ModelServiceError(f"failed to load model: {e}") from e

        logger.info("GGUF model loaded (context window: %d)", self.llm.n_ctx())

    def complete(self, messages: list, max_new_tokens=LLM_MAX_NEW_TOKENS, temperature=LLM_TEMPERATURE) -> dict:
        """
        Run one chat completion and return the raw llama.cpp response dict.
        Any failure is raised as ModelServiceError; retries are left to the caller.
        """
        try:
            return self.llm.create_chat_completion(
                messages=messages,
                max_tokens=max_new_tokens,
                temperature=temperature,
                top_p=0.9,
                stream=False
            )
        except Exception as e:
            if "context" in str(e).lower() or "token" in str(e).lower():
                raise ModelServiceError(f"input text is too long for the model context window ({e})") from e
            raise ModelServiceError(f"generation failed: {e}") from e
