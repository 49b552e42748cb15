"""Line-oriented parsing of ``cleartool mklabel`` output.

Example line:
    Created label "REL_1.0" on "src/Main.java" version "\\main\\3".
"""

import logging
import re

from cclabel.core.types import TaggedFile

logger = logging.getLogger(__name__)

_CREATED_LABEL = re.compile(
    r'^Created label "(?P<label>[^"]+)" on "(?P<path>[^"]+)"'
    r'(?: version "(?P<version>[^"]+)")?'
)


class TagOutputCollector:
    """Collects the files cleartool reports as labelled.

    Pass ``consume_line`` as the stdout consumer of a CommandExecutor.
    """

    def __init__(self) -> None:
        self._tagged_files: list[TaggedFile] = []

    def consume_line(self, line: str) -> None:
        match = _CREATED_LABEL.match(line.strip())
        if match is None:
            logger.debug("Ignoring mklabel output: %s", line)
            return
        self._tagged_files.append(
            TaggedFile(
                path=match.group("path"),
                label=match.group("label"),
                version=match.group("version"),
            )
        )

    @property
    def tagged_files(self) -> list[TaggedFile]:
        return list(self._tagged_files)
