"""Rendering of search results using Jinja2.

Results are rendered from a plain context dict built per source tab, so the
templates never touch model objects directly and strict undefined checking
catches missing keys early.
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from job_dashboard.domain.models import JobRecord, JobSource
from job_dashboard.logging import get_logger
from job_dashboard.session.models import DisplayState

logger = get_logger(__name__, component="rendering")

# Record attributes shown in listings
DISPLAY_FIELDS = (
    "title",
    "company",
    "location",
    "experience",
    "salary",
    "work_mode",
    "posted_at",
    "url",
)


class RenderingError(Exception):
    """Raised when a results template cannot be rendered."""


class ResultsRenderer:
    """Renders per-source results as text or JSON.

    Templates are loaded from the job_dashboard.rendering package and cached
    by the Jinja2 environment.
    """

    def __init__(self, template_dir: str = "templates", text_template: str = "results.txt.j2"):
        """Initialize renderer with a Jinja2 environment.

        Args:
            template_dir: Directory name within the job_dashboard.rendering package
            text_template: Filename of the plain text listing template
        """
        self.text_template_name = text_template
        self.env = Environment(
            loader=PackageLoader("job_dashboard.rendering", template_dir),
            autoescape=False,  # Plain text output
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def build_context(
        self,
        results: Mapping[JobSource, Sequence[JobRecord]],
        is_filtered: bool = False,
        unfiltered_results: Optional[Mapping[JobSource, Sequence[JobRecord]]] = None,
        errors: Sequence[str] = (),
        sources: Optional[Sequence[JobSource]] = None,
    ) -> Dict[str, Any]:
        """Build the template context.

        Every source gets a section, in tab order, even when it has no records,
        unless ``sources`` narrows the listing.

        Args:
            results: Records shown per source
            is_filtered: Whether the results were produced by active filters
            unfiltered_results: Records before filtering (for "N of M" counts)
            errors: User-facing error messages to show above the listing
            sources: Sources to list (default: all, in tab order)

        Returns:
            Dict with "sections", "is_filtered" and "errors"
        """
        unfiltered_results = unfiltered_results if unfiltered_results is not None else results
        sections: List[Dict[str, Any]] = []
        for source in sources or list(JobSource):
            records = list(results.get(source, []))
            sections.append(
                {
                    "label": source.value,
                    "count": len(records),
                    "total": len(unfiltered_results.get(source, [])),
                    "jobs": [self._job_context(record) for record in records],
                }
            )
        return {"sections": sections, "is_filtered": is_filtered, "errors": list(errors)}

    def render_text(self, context: Dict[str, Any]) -> str:
        """Render a context built by build_context() as a text listing.

        Raises:
            RenderingError: If template rendering fails
        """
        try:
            template = self.env.get_template(self.text_template_name)
            return template.render(context)
        except TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            logger.error(error_msg, extra={"event": "rendering.failed"}, exc_info=True)
            raise RenderingError(error_msg) from e

    def render_json(self, context: Dict[str, Any]) -> str:
        """Render a context built by build_context() as indented JSON."""
        return json.dumps(context, indent=2, ensure_ascii=False)

    def render_state(self, state: DisplayState, errors: Sequence[str] = (), format_type: str = "text") -> str:
        """Render a session display state in the given format ("text" or "json")."""
        context = self.build_context(
            state.results,
            is_filtered=state.is_filtered,
            unfiltered_results=state.unfiltered_results,
            errors=errors,
        )
        if format_type == "json":
            return self.render_json(context)
        return self.render_text(context)

    @staticmethod
    def _job_context(record: JobRecord) -> Dict[str, str]:
        return {name: record.get(name) or "" for name in DISPLAY_FIELDS}
