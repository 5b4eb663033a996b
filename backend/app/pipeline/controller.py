import logging
from typing import Optional

from app.generation.artifact import Artifact, GenerationResult
from app.generation.classifier import is_new_component_request
from app.generation.refiner import refine_artifact
from app.llm.remote_generator import RemoteGenerator
from app.templates import TemplateRegistry, get_template_registry

logger = logging.getLogger(__name__)


class GenerationPipeline:
    """
    Remote generation with a deterministic local fallback.

    The remote generator runs first. When it asks for a fallback the
    local path decides: a new-component prompt gets a canned template,
    otherwise an existing artifact is refined, otherwise a template is
    matched anyway.
    """

    def __init__(
        self,
        remote: Optional[RemoteGenerator] = None,
        registry: Optional[TemplateRegistry] = None,
    ):
        self.remote = remote
        self.registry = registry or get_template_registry()

    def run(self, prompt: str, context: Optional[Artifact] = None) -> GenerationResult:
        if self.remote is not None:
            result = self.remote.generate(prompt, context)
            if result.is_success:
                return result
            logger.info("Using local fallback: %s", result.reason)

        return self.run_local(prompt, context)

    def run_local(self, prompt: str, context: Optional[Artifact] = None) -> GenerationResult:
        # New component requests ignore whatever context was passed in
        if is_new_component_request(prompt):
            template = self.registry.match(prompt)
            logger.info("New component request, generating '%s'", template.id)
            return GenerationResult.success(template.artifact, source="template")

        if context is not None and context.is_present:
            logger.info("Iterative refinement of existing component")
            return GenerationResult.success(refine_artifact(context, prompt), source="refinement")

        template = self.registry.match(prompt)
        logger.info("Fallback component matching, generating '%s'", template.id)
        return GenerationResult.success(template.artifact, source="template")
