"""Render accumulated notices for a pull request description using Jinja2."""

import logging
from typing import Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from .models import Notice, NoticeTemplateError

logger = logging.getLogger(__name__)


class NoticeRenderer:
    """Renders the notices section of a pull request body.

    Notices are rendered in the order they were collected, each followed
    by a blank line. Markdown is emitted verbatim, so autoescaping is off.
    """

    def __init__(
        self,
        template_dir: str = "pr_templates",
        template_name: str = "notices.md.j2",
    ):
        self.template_name = template_name
        self.env = Environment(
            loader=PackageLoader("updater.notices", template_dir),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
        )

    def render(self, notices: Sequence[Notice]) -> str:
        """Render notices into Markdown.

        Args:
            notices: Notices in display order

        Returns:
            The rendered Markdown, or an empty string when there are no notices

        Raises:
            NoticeTemplateError: If the template cannot be loaded or rendered
        """
        if not notices:
            return ""

        try:
            template = self.env.get_template(self.template_name)
            rendered = template.render(notices=notices)
        except TemplateError as e:
            error_msg = f"Notice template rendering failed: {e}"
            logger.error(error_msg, exc_info=True)
            raise NoticeTemplateError(error_msg) from e

        logger.debug(f"Rendered {len(notices)} notice(s) for pull request body")
        return rendered
