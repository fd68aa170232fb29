"""Command pattern implementation for reader actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType
from .session import SearchMode

if TYPE_CHECKING:
    from .reader import Reader
    from .keyboard import KeyEvent


class ReaderCommand(ABC):
    """Base class for reader commands."""

    @abstractmethod
    def execute(self, reader: 'Reader', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            reader: Reader instance
            key_event: The key event that triggered this command

        Returns:
            True if the screen needs to be redrawn
        """


class NextPageCommand(ReaderCommand):
    def execute(self, reader, key_event):
        return reader.session.next_page()


class PreviousPageCommand(ReaderCommand):
    def execute(self, reader, key_event):
        return reader.session.previous_page()


class FirstPageCommand(ReaderCommand):
    def execute(self, reader, key_event):
        return reader.session.go_to_page(0)


class LastPageCommand(ReaderCommand):
    def execute(self, reader, key_event):
        return reader.session.go_to_page(reader.session.pages.page_count - 1)


class EnterSearchCommand(ReaderCommand):
    def execute(self, reader, key_event):
        reader.session.enter_search()
        return True


class NextOccurrenceCommand(ReaderCommand):
    def execute(self, reader, key_event):
        return reader.session.next_occurrence()


class PreviousOccurrenceCommand(ReaderCommand):
    def execute(self, reader, key_event):
        return reader.session.previous_occurrence()


class EscapeCommand(ReaderCommand):
    """Leave search mode, or quit when not searching."""

    def execute(self, reader, key_event):
        if reader.session.mode is SearchMode.NOT_SEARCHING:
            reader.running = False
            return False
        reader.session.exit_search()
        return True


class QuitCommand(ReaderCommand):
    def execute(self, reader, key_event):
        reader.running = False
        return False


class SubmitSearchCommand(ReaderCommand):
    def execute(self, reader, key_event):
        reader.session.submit_search()
        return True


class EraseQueryCommand(ReaderCommand):
    def execute(self, reader, key_event):
        reader.session.erase_query()
        return True


class TypeQueryCommand(ReaderCommand):
    def execute(self, reader, key_event):
        reader.session.type_query(key_event.value)
        return True


class CommandRegistry:
    """Maps keys to commands, with a separate table for the search prompt."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], ReaderCommand] = {}
        self._query_commands: Dict[Tuple[KeyType, str], ReaderCommand] = {}
        self._register_default_commands()

    def _register_default_commands(self):
        next_page = NextPageCommand()
        previous_page = PreviousPageCommand()

        # Paging
        for key in ((KeyType.REGULAR, 'a'), (KeyType.REGULAR, ' '),
                    (KeyType.SPECIAL, 'page_down'), (KeyType.SPECIAL, 'right'),
                    (KeyType.SPECIAL, 'down')):
            self.register(key, next_page)
        for key in ((KeyType.REGULAR, 'q'), (KeyType.SPECIAL, 'page_up'),
                    (KeyType.SPECIAL, 'left'), (KeyType.SPECIAL, 'up')):
            self.register(key, previous_page)
        self.register((KeyType.SPECIAL, 'home'), FirstPageCommand())
        self.register((KeyType.SPECIAL, 'end'), LastPageCommand())

        # Search
        self.register((KeyType.REGULAR, '/'), EnterSearchCommand())
        self.register((KeyType.REGULAR, 'n'), NextOccurrenceCommand())
        self.register((KeyType.REGULAR, 'p'), PreviousOccurrenceCommand())

        # System commands
        self.register((KeyType.SPECIAL, 'escape'), EscapeCommand())
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.CTRL, 'c'), QuitCommand())

        # Search prompt
        self.register_query((KeyType.SPECIAL, 'enter'), SubmitSearchCommand())
        self.register_query((KeyType.SPECIAL, 'backspace'), EraseQueryCommand())
        self.register_query((KeyType.SPECIAL, 'escape'), EscapeCommand())
        self.register_query((KeyType.CTRL, 'q'), QuitCommand())
        self.register_query((KeyType.CTRL, 'c'), QuitCommand())

    def register(self, key: Tuple[KeyType, str], command: ReaderCommand):
        """Register a command for a key while reading."""
        self._commands[key] = command

    def register_query(self, key: Tuple[KeyType, str], command: ReaderCommand):
        """Register a command for a key while typing a search query."""
        self._query_commands[key] = command

    def get_command(self, mode: SearchMode, key_type: KeyType, value: str) -> Optional[ReaderCommand]:
        table = self._query_commands if mode is SearchMode.ENTERING_QUERY else self._commands
        return table.get((key_type, value))

    def execute(self, reader: 'Reader', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the screen needs to be redrawn
        """
        mode = reader.session.mode
        command = self.get_command(mode, key_event.key_type, key_event.value)
        if command:
            return command.execute(reader, key_event)

        # Plain characters extend the search query
        if mode is SearchMode.ENTERING_QUERY and key_event.key_type == KeyType.REGULAR:
            return TypeQueryCommand().execute(reader, key_event)

        return False
