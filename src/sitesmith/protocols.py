"""
sitesmith Protocol Definitions

This module contains the Protocol definitions for the sitesmith framework.

Protocols are the foundation layer with zero dependencies on other sitesmith modules.
"""

from typing import Protocol, Dict, Any, List, runtime_checkable


# ============================================================================
# Step Protocol
# ============================================================================

@runtime_checkable
class StepProtocol(Protocol):
    """
    Protocol for a pipeline step.

    The orchestrator only relies on these four members: it calls `init`
    then `can_process` on every step, then `process` on the applicable ones.
    """

    @property
    def name(self) -> str:
        """Human readable label, used for progress reporting only"""
        ...

    def init(self, options: Any) -> None:
        """Receive the resolved build options"""
        ...

    def can_process(self) -> bool:
        """Whether the step takes part in the current build"""
        ...

    def process(self) -> None:
        """Do the work, mutating the build context"""
        ...


# ============================================================================
# Renderer Protocol
# ============================================================================

@runtime_checkable
class RendererProtocol(Protocol):
    """
    Protocol for template rendering engines.
    """

    def has_template(self, name: str) -> bool:
        """
        Check if a template can be loaded.

        Args:
            name: Template name relative to the layouts directories
        """
        ...

    def render(self, template: str, variables: Dict[str, Any]) -> str:
        """
        Render a template.

        Args:
            template: Template name relative to the layouts directories
            variables: Variables exposed to the template

        Returns:
            The rendered text
        """
        ...


# ============================================================================
# Generator Protocols
# ============================================================================

@runtime_checkable
class GeneratorRegistryProtocol(Protocol):
    """
    Protocol for the registry of virtual page generators.
    """

    @property
    def names(self) -> List[str]:
        """Names of the registered generators, in run order"""
        ...

    def generate(self) -> Any:
        """
        Run every registered generator.

        Returns:
            A collection of the generated pages
        """
        ...
