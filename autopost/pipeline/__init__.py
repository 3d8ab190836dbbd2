"""Post generation: prompts, Claude draft, illustration, normalization, run orchestration."""

from autopost.pipeline.generator import GenerationError, generate_draft
from autopost.pipeline.normalizer import normalize
from autopost.pipeline.runner import RunResult, run_once

__all__ = ["GenerationError", "generate_draft", "normalize", "RunResult", "run_once"]
