"""Compiler facade: register sources, then lex or parse them.

Each call adds the source to the compiler's FileStore so that any error it
raises can be formatted against the right text later.

Thread Safety:
A Compiler may be shared across threads: per-call lexers and parsers are
independent, the FileStore is lock-guarded, and the config is applied per
call through a ContextVar.

"""

from __future__ import annotations

from shlang.config import ParseConfig, parse_config_context
from shlang.diagnostics import format_report
from shlang.errors import CompileError
from shlang.filestore import FileStore
from shlang.lexer import tokenize
from shlang.location import Spanned
from shlang.nodes import Node
from shlang.parser import Parser
from shlang.tokens import Token
from shlang.utils.logger import get_logger

logger = get_logger(__name__)


class Compiler:
    """Lex and parse sources registered in a shared FileStore.

    Usage:
            >>> compiler = Compiler(silent=True)
            >>> nodes = compiler.parse("<p>hi</p>")
            >>> nodes[0].item.name
            'p'
            >>> len(compiler.file_store)
            1

    Errors:
        Errors are always re-raised. Unless ``silent`` is set, the formatted
        report is logged at ERROR level on the ``shlang.compiler`` logger
        first.

    """

    __slots__ = ("_config", "_file_store", "_silent")

    def __init__(
        self,
        file_store: FileStore | None = None,
        *,
        silent: bool = False,
        config: ParseConfig | None = None,
    ) -> None:
        self._file_store = file_store if file_store is not None else FileStore()
        self._silent = silent
        self._config = config if config is not None else ParseConfig()

    @property
    def file_store(self) -> FileStore:
        return self._file_store

    @property
    def silent(self) -> bool:
        return self._silent

    @property
    def config(self) -> ParseConfig:
        return self._config

    def lex(self, source: str, *, name: str | None = None) -> list[Token]:
        """Register source and return its tokens, EOF excluded.

        Raises:
            LexError: On the first malformed token
        """
        file_id = self._file_store.add(source, name)
        logger.debug("Lexing file %d", file_id)
        try:
            return tokenize(source, file_id)
        except CompileError as err:
            self._log_error(err)
            raise

    def parse(self, source: str, *, name: str | None = None) -> list[Spanned[Node]]:
        """Register source and parse it into top-level nodes.

        Raises:
            LexError: On the first malformed token
            ParseError: On the first syntax error
        """
        file_id = self._file_store.add(source, name)
        try:
            with parse_config_context(self._config):
                return Parser(source, file_id).parse()
        except CompileError as err:
            self._log_error(err)
            raise

    def format_error(self, error: CompileError) -> str:
        """Plain-text report for an error raised by this compiler."""
        return format_report(error.report(), self._file_store)

    def _log_error(self, error: CompileError) -> None:
        if self._silent:
            return
        logger.error("%s", self.format_error(error))
