"""Wire message construction: priority preamble, octet counting, datagram splitting."""

from dataclasses import dataclass

# Largest datagram payload sent to the collector, preamble included.
MAX_DATAGRAM_SIZE = 900


@dataclass(frozen=True)
class WireMessage:
    preamble: bytes
    body: bytes

    @property
    def payload(self) -> bytes:
        return self.preamble + self.body

    def __len__(self) -> int:
        return len(self.preamble) + len(self.body)


def build_preamble(priority: int) -> bytes:
    """Render the '<N>' priority tag."""
    return f"<{priority}>".encode("ascii")


def build_wire_message(priority: int, text: str) -> WireMessage:
    """Combine the priority tag with the UTF-8 encoded message text."""
    return WireMessage(preamble=build_preamble(priority), body=text.encode("utf-8"))


def octet_count_prefix(message: WireMessage) -> bytes:
    """Length token for octet-counting framing: '<byte count> '."""
    return f"{len(message)} ".encode("ascii")


def frame_octet_counted(message: WireMessage) -> bytes:
    """Full stream frame: length token followed by preamble and body."""
    return octet_count_prefix(message) + message.payload


def split_datagrams(message: WireMessage, limit: int = MAX_DATAGRAM_SIZE) -> list[bytes]:
    """Split a message into independent datagrams of at most ``limit`` bytes.

    Every datagram starts with the preamble. While the remaining record is
    too large, the first ``limit`` bytes are emitted and the rest of the
    body is re-prefixed with the preamble. The split is on raw byte
    offsets, so a multi-byte character may straddle two datagrams.

    An empty body produces no datagrams.
    """
    preamble = message.preamble
    body = message.body
    chunk = limit - len(preamble)
    datagrams = []
    while body:
        if len(preamble) + len(body) > limit:
            datagrams.append(preamble + body[:chunk])
            body = body[chunk:]
        else:
            datagrams.append(preamble + body)
            break
    return datagrams
