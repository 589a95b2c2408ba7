"""
Template factory for creating template instances
"""

from .base_template import BaseTemplate
from .page_template import PageTemplate
from ...utils.exceptions import TemplateError
from ...utils.logging_config import get_logger

logger = get_logger('html_generator.template_factory')


class TemplateFactory:
    """Factory for creating template instances by name"""

    _templates = {
        'page': PageTemplate,
    }

    @classmethod
    def create_template(cls, template_name: str, template_text: str) -> BaseTemplate:
        """
        Create template instance

        Args:
            template_name: Name of template to create
            template_text: Template document

        Returns:
            Template instance
        """
        if template_name not in cls._templates:
            available_templates = list(cls._templates.keys())
            raise TemplateError(
                f"Unknown template: {template_name}. Available templates: {available_templates}"
            )

        template_class = cls._templates[template_name]
        logger.debug(f"Creating template: {template_name}")

        return template_class(template_text)
