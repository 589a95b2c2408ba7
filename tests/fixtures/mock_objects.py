"""
Mock objects for testing external dependencies
Provides mocks for the conversion log callback and HTTP sessions
"""
import pytest
from unittest.mock import Mock

import requests


class MockLogCallback:
    """Records (message, type) calls made through a conversion log callback"""

    def __init__(self):
        self.calls = []

    def __call__(self, message, log_type='status'):
        self.calls.append((message, log_type))

    def messages(self, log_type=None):
        """Get logged messages, optionally of one type only"""
        return [message for message, kind in self.calls if log_type is None or kind == log_type]

    def has_logged(self, log_type, message_substring):
        """Check if a message containing substring was logged with type"""
        return any(message_substring in message for message in self.messages(log_type))


def make_response(content: bytes = b'', status_code: int = 200, text: str = None) -> Mock:
    """Build a fake requests.Response"""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.content = content
    response.text = text if text is not None else content.decode('utf-8', errors='replace')

    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None

    return response


@pytest.fixture
def mock_log():
    """Provide mock log callback for testing"""
    return MockLogCallback()

@pytest.fixture
def mock_session():
    """Provide a requests session whose get() is mocked"""
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(b'console.log("engine")')
    return session
