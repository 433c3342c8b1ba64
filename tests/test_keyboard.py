"""Test keyboard input handling."""

import pytest

from late.keyboard import KeyboardHandler, KeyEvent, KeyType


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self, keys=()):
        self._key_queue = list(keys)

    def read_key(self):
        if self._key_queue:
            return self._key_queue.pop(0)
        return None


@pytest.fixture
def handler():
    return KeyboardHandler(MockTerminal())


@pytest.mark.parametrize("raw,value", [
    ('<LEFT>', 'left'),
    ('<RIGHT>', 'right'),
    ('<UP>', 'up'),
    ('<DOWN>', 'down'),
    ('<HOME>', 'home'),
    ('<END>', 'end'),
    ('<PAGEUP>', 'page_up'),
    ('<PAGEDOWN>', 'page_down'),
    ('<BACKSPACE>', 'backspace'),
    ('<DELETE>', 'delete'),
    ('<ESC>', 'escape'),
])
def test_named_special_keys(handler, raw, value):
    event = handler.parse_key(raw)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == value


@pytest.mark.parametrize("raw", ['<Ctrl-j>', '<Ctrl-m>', '\n', '\r'])
def test_enter_variants(handler, raw):
    event = handler.parse_key(raw)
    assert (event.key_type, event.value) == (KeyType.SPECIAL, 'enter')


def test_ctrl_letters(handler):
    assert handler.parse_key('<Ctrl-q>') == KeyEvent(KeyType.CTRL, 'q', '<Ctrl-q>')
    assert handler.parse_key('\x13') == KeyEvent(KeyType.CTRL, 's', '\x13')


def test_backspace_control_codes(handler):
    assert handler.parse_key('\x7f').value == 'backspace'
    assert handler.parse_key('\x08').value == 'backspace'


def test_whitespace_tokens_are_text(handler):
    assert handler.parse_key('<SPACE>') == KeyEvent(KeyType.REGULAR, ' ', '<SPACE>')
    assert handler.parse_key('<TAB>').value == '\t'
    assert handler.parse_key('\t').key_type == KeyType.REGULAR


def test_regular_text(handler):
    event = handler.parse_key('é')
    assert event.key_type == KeyType.REGULAR
    assert event.value == 'é'
    assert handler.parse_key('<').value == '<'


def test_unknown_named_key_is_special(handler):
    event = handler.parse_key('<F5>')
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'f5'


def test_get_key_event_reads_terminal():
    handler = KeyboardHandler(MockTerminal(['a', '<LEFT>']))
    assert handler.get_key_event().value == 'a'
    assert handler.get_key_event().value == 'left'
    assert handler.get_key_event() is None
