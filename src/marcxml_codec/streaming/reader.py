"""Forward-only reader for large MARCXML collection files.

``CollectionReader`` walks the file with ``lxml.etree.iterparse`` and hands
back the raw XML of one ``/collection/record`` element at a time. Finished
top-level subtrees are cleared as soon as they end, so memory use is bounded
by the size of a single record rather than the size of the file.
"""

import os
from pathlib import Path
from typing import IO, Any, Iterator, List, Optional, Union

from lxml import etree

from marcxml_codec.shared import (
    DEFAULT_CONFIG,
    CodecConfig,
    CollectionStateError,
    MarcXmlIOError,
    MarcXmlParseError,
    get_logger,
)
from marcxml_codec.tree import collecting_errors

RECORD_PATH = ["collection", "record"]


class CollectionReader:
    """Stateful cursor over the records of a MARCXML collection file.

    The reader owns one open file at a time. It is not safe to share an
    instance between threads.

    Examples:
        >>> with CollectionReader("records.xml") as reader:
        ...     for xml in reader:
        ...         record = from_string(xml)
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        config: Optional[CodecConfig] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.file_path: Optional[str] = None
        self.records_read = 0
        self._file: Optional[IO[bytes]] = None
        self._events: Optional[Iterator[Any]] = None
        self._current_path: List[str] = []
        self._depth = 0
        self._logger = get_logger(
            __name__, self.config.correlation_id, "collection_reader"
        )
        if path is not None:
            self.open(path)

    @property
    def is_open(self) -> bool:
        return self._events is not None

    def open(self, path: Union[str, Path]) -> None:
        """Open a collection file, replacing any file opened before.

        Raises:
            MarcXmlIOError: If the file cannot be opened for reading
        """
        self.file_path = os.fspath(path)
        self._release()

        try:
            handle = open(self.file_path, "rb")
        except OSError as e:
            self._logger.error(
                "Cannot open collection file", extra={"path": self.file_path}
            )
            raise MarcXmlIOError(self.file_path) from e

        self._file = handle
        self._events = etree.iterparse(
            handle,
            events=("start", "end"),
            huge_tree=self.config.huge_tree,
            resolve_entities=self.config.resolve_entities,
            no_network=True,
        )
        self._current_path = []
        self._depth = 0
        self.records_read = 0
        self._logger.info("Opened collection file", extra={"path": self.file_path})

    def rewind(self) -> None:
        """Start reading the current collection file again from the top.

        Raises:
            CollectionStateError: If no file was ever opened
            MarcXmlIOError: If the file can no longer be opened
        """
        if self.file_path is None:
            raise CollectionStateError()
        self._logger.debug("Rewinding collection file", extra={"path": self.file_path})
        self.open(self.file_path)

    def next_record(self) -> str:
        """Return the XML of the next record, or an empty string at end of file.

        Only ``record`` elements directly below a ``collection`` root match,
        and only when unqualified or in the MARC21 slim namespace.

        Raises:
            CollectionStateError: If no file is open
            MarcXmlParseError: If the file turns out not to be well-formed
            MarcXmlIOError: If reading the file fails
        """
        if self._events is None:
            raise CollectionStateError()

        try:
            with collecting_errors(self.config.correlation_id):
                record = self._scan()
        except MarcXmlParseError:
            self._release()
            raise
        except OSError as e:
            self._release()
            raise MarcXmlIOError(self.file_path) from e

        if record:
            self.records_read += 1
        else:
            self._logger.info(
                "Reached end of collection file",
                extra={"path": self.file_path, "records_read": self.records_read},
            )
        return record

    def _scan(self) -> str:
        matched = None
        for event, element in self._events:
            if event == "end":
                self._depth -= 1
                if element is matched:
                    xml = etree.tostring(element, encoding="unicode", with_tail=False)
                    self._discard(element)
                    return xml
                if self._depth == 1:
                    self._discard(element)
                continue

            del self._current_path[self._depth:]
            qname = etree.QName(element)
            self._current_path.append(qname.localname)
            self._depth += 1

            if (
                matched is None
                and self._current_path == RECORD_PATH
                and qname.namespace in (None, self.config.namespace)
            ):
                matched = element
        return ""

    @staticmethod
    def _discard(element: etree._Element) -> None:
        """Free a finished top-level subtree and the siblings before it."""
        element.clear(keep_tail=True)
        parent = element.getparent()
        if parent is not None:
            while element.getprevious() is not None:
                del parent[0]

    def _release(self) -> None:
        self._events = None
        if self._file is not None:
            self._file.close()
            self._file = None

    def close(self) -> None:
        """Close the file. ``rewind`` can reopen it later."""
        self._release()

    def __iter__(self) -> Iterator[str]:
        while True:
            record = self.next_record()
            if not record:
                return
            yield record

    def __enter__(self) -> "CollectionReader":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
