"""
Abstract base template for HTML generation
Provides placeholder validation and substitution for all page templates
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Any, Mapping

from ...utils.logging_config import get_logger
from ...utils.exceptions import TemplateError

logger = get_logger('html_generator.templates')

# Every one of these must appear exactly once in the template text
PLACEHOLDERS = (
    'TITLE',
    'WRAPPER_CSS',
    'FAVICON',
    'LOADING_IMAGE',
    'CLASSES',
    'STYLES',
    'CSS',
    'VM',
    'SCRIPTS',
)

_PLACEHOLDER_PATTERN = re.compile(r'\{(' + '|'.join(PLACEHOLDERS) + r')\}')


class BaseTemplate(ABC):
    """
    Abstract base class for all HTML templates
    Defines the interface and common functionality
    """

    def __init__(self, template_text: str):
        """
        Initialise template with its text

        Args:
            template_text: Template document containing the placeholders
        """
        self.template_text = template_text
        self.logger = get_logger(f'html_generator.templates.{self.__class__.__name__}')

        self._validate_template()

    @abstractmethod
    def generate_html(self, data: Dict[str, Any]) -> str:
        """
        Generate HTML content

        Args:
            data: Values needed to fill the template

        Returns:
            Complete HTML document as string
        """
        pass

    @abstractmethod
    def get_required_data_fields(self) -> List[str]:
        """
        Return list of required data fields for this template

        Returns:
            List of required field names
        """
        pass

    def _validate_template(self) -> None:
        """Check that every placeholder occurs exactly once"""
        for placeholder in PLACEHOLDERS:
            count = self.template_text.count(f'{{{placeholder}}}')
            if count != 1:
                raise TemplateError(
                    f"Template must contain {{{placeholder}}} exactly once, found {count}",
                    placeholder
                )

        self.logger.debug("Template placeholders validated")

    def _validate_data(self, data: Dict[str, Any]) -> None:
        """
        Validate that required data fields are present

        Args:
            data: Data to validate
        """
        missing_fields = [field for field in self.get_required_data_fields() if field not in data]

        if missing_fields:
            raise TemplateError(
                f"Missing required data fields for {self.__class__.__name__}: {missing_fields}"
            )

    def substitute(self, values: Mapping[str, str]) -> str:
        """
        Replace every placeholder with its value in a single pass

        Values are inserted as is and never rescanned, so a value that happens to
        contain a placeholder token is left alone.

        Args:
            values: Placeholder name (without braces) to replacement text

        Returns:
            The filled-in document
        """
        for placeholder in PLACEHOLDERS:
            if placeholder not in values:
                raise TemplateError(f"No value computed for {{{placeholder}}}", placeholder)

        unknown = sorted(set(values) - set(PLACEHOLDERS))
        if unknown:
            raise TemplateError(f"Unknown placeholders: {unknown}", unknown[0])

        return _PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(1)], self.template_text)
