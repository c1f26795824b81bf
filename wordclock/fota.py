"""Over-the-air firmware and filesystem updates from a remote server."""

from __future__ import annotations

import json
import logging
import os
import shutil
import socket
import ssl
import tempfile
import urllib.error
import urllib.request
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Callable, Iterable, Iterator

logger = logging.getLogger(__name__)

DEFAULT_PORT = 443
CONNECT_TIMEOUT = 5.0
_CHUNK_SIZE = 4096
_CONTENT_LENGTH = "Content-Length: "
_CONTENT_TYPE = "Content-Type: "
_BINARY_TYPE = "application/octet-stream"

ProgressCallback = Callable[[int, int], None]
EndCallback = Callable[[], None]


@dataclass(frozen=True)
class UpdateInfo:
    """Where an available update can be downloaded from."""

    host: str
    port: int
    path: str
    filesystem: bool


def header_value(line: str, header_name: str) -> str:
    """Return what follows the header name at the start of a header line."""
    return line[len(header_name):]


def _atoi(text: str) -> int:
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def parse_response_headers(lines: Iterable[str]) -> tuple[int, bool]:
    """Read response header lines up to the blank line.

    Returns the content length and whether the payload is a binary stream.
    Reading stops early on a status other than 200.
    """
    content_length = 0
    valid_content_type = False
    for raw in lines:
        line = raw.strip()
        if not line:
            break
        if line.startswith("HTTP/1.1") and "200" not in line:
            logger.info("Got a non 200 status code from server. Exiting OTA Update.")
            break
        if line.startswith(_CONTENT_LENGTH):
            content_length = _atoi(header_value(line, _CONTENT_LENGTH))
            logger.info("Got %d bytes from server", content_length)
        if line.startswith(_CONTENT_TYPE):
            content_type = header_value(line, _CONTENT_TYPE)
            logger.info("Got %s payload.", content_type)
            if content_type == _BINARY_TYPE:
                valid_content_type = True
    return content_length, valid_content_type


def device_id() -> str:
    """Identifier of this device: the low 24 bits of its hardware address, in decimal."""
    return str(uuid.getnode() & 0xFFFFFF)


def _insecure_context() -> ssl.SSLContext:
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def _as_int(value: object) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def _as_str(value: object) -> str:
    return value if isinstance(value, str) else ""


def _header_lines(stream: IO[bytes]) -> Iterator[str]:
    for raw in iter(stream.readline, b""):
        yield raw.decode("latin-1")


class FirmwareUpdater:
    """Checks a server for newer images and downloads them."""

    def __init__(self, firmware_type: str, firmware_version: int, filesystem_version: int,
                 check_url: str = "", use_device_id: bool = False) -> None:
        self.firmware_type = firmware_type
        self.firmware_version = firmware_version
        self.filesystem_version = filesystem_version
        self.check_url = check_url
        self.use_device_id = use_device_id
        self.host = ""
        self.port = DEFAULT_PORT
        self.path = ""
        self.filesystem_update = False
        self._progress_callback: ProgressCallback | None = None
        self._end_callback: EndCallback | None = None

    def on_progress(self, fn: ProgressCallback) -> None:
        """Call fn(written, total) as image data arrives."""
        self._progress_callback = fn

    def on_end(self, fn: EndCallback) -> None:
        """Call fn() once an image has been installed completely."""
        self._end_callback = fn

    def evaluate(self, document: dict) -> UpdateInfo | None:
        """Decide from a version document whether an update applies, and remember its source."""
        published_type = _as_str(document.get("type"))
        firmware_version = _as_int(document.get("firmware_version"))
        filesystem_version = _as_int(document.get("filesystem_version"))
        self.host = _as_str(document.get("host"))
        self.port = _as_int(document.get("port"))
        self.path = _as_str(document.get("firmware"))
        filesystem_path = _as_str(document.get("filesystem"))

        if published_type != self.firmware_type:
            return None
        if self.firmware_version and firmware_version > self.firmware_version:
            self.filesystem_update = False
        elif filesystem_version > self.filesystem_version:
            self.filesystem_update = True
            self.path = filesystem_path
        else:
            return None
        return UpdateInfo(self.host, self.port, self.path, self.filesystem_update)

    def check(self) -> bool:
        """Fetch the version document; return whether an update is available."""
        url = self.check_url
        if self.use_device_id:
            url = f"{url}?id={device_id()}"
        self.port = DEFAULT_PORT
        logger.info("Getting HTTP %s", url)
        try:
            with urllib.request.urlopen(url, context=_insecure_context(),
                                        timeout=CONNECT_TIMEOUT) as response:
                status = response.status
                payload = response.read() if status == 200 else b""
        except (urllib.error.URLError, OSError):
            logger.info("Error on HTTP request")
            return False
        if status != 200:
            logger.info("Error on HTTP request")
            return False
        try:
            document = json.loads(payload)
        except ValueError:
            logger.info("Parsing failed")
            return False
        if not isinstance(document, dict):
            logger.info("Parsing failed")
            return False
        return self.evaluate(document) is not None

    def _connect(self) -> socket.socket:
        raw = socket.create_connection((self.host, self.port), timeout=CONNECT_TIMEOUT)
        try:
            return _insecure_context().wrap_socket(raw, server_hostname=self.host)
        except Exception:
            raw.close()
            raise

    def exec_ota(self, destination: str | os.PathLike[str]) -> bool:
        """Download the remembered image into destination; return whether it was installed."""
        logger.info("Connecting to: %s", self.host)
        try:
            sock = self._connect()
        except OSError:
            logger.info("Connection to %s failed. Please check your setup", self.host)
            logger.info("contentLength : 0, isValidContentType : 0")
            logger.info("There was no content in the response")
            return False
        try:
            logger.info("Fetching Bin: %s", self.path)
            request = (f"GET {self.path} HTTP/1.1\r\n"
                       f"Host: {self.host}\r\n"
                       "Cache-Control: no-cache\r\n"
                       "Connection: close\r\n\r\n")
            stream = sock.makefile("rb")
            try:
                sock.sendall(request.encode("latin-1"))
                content_length, valid = parse_response_headers(_header_lines(stream))
            except TimeoutError:
                logger.info("Client Timeout !")
                return False
            logger.info("contentLength : %d, isValidContentType : %d",
                        content_length, int(valid))
            if not (content_length and valid):
                logger.info("There was no content in the response")
                return False
            return self._install(stream, content_length, Path(destination))
        finally:
            sock.close()

    def _install(self, stream: IO[bytes], content_length: int, destination: Path) -> bool:
        directory = destination.parent
        if content_length <= 0 or shutil.disk_usage(directory).free < content_length:
            logger.info("Not enough space to begin OTA")
            return False
        logger.info("Begin OTA Update, this may take a couple of minutes..")
        fd, temp_name = tempfile.mkstemp(dir=directory, prefix=f".{destination.name}.")
        written = 0
        try:
            with os.fdopen(fd, "wb") as out:
                while written < content_length:
                    try:
                        chunk = stream.read(min(_CHUNK_SIZE, content_length - written))
                    except TimeoutError:
                        break
                    if not chunk:
                        break
                    out.write(chunk)
                    written += len(chunk)
                    if self._progress_callback:
                        self._progress_callback(written, content_length)
            if written != content_length:
                logger.info("Written only : %d/%d", written, content_length)
                logger.info("Error Occurred. Error #: incomplete image")
                return False
            logger.info("Written : %d successfully", written)
            os.replace(temp_name, destination)
        finally:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
        logger.info("OTA done!")
        if self._end_callback:
            self._end_callback()
        logger.info("Update successfully completed.")
        return True

    def force_update(self, host: str, port: int, path: str,
                     destination: str | os.PathLike[str]) -> bool:
        """Download the given image regardless of the installed version."""
        self.host = host
        self.port = port
        self.path = path
        self.exec_ota(destination)
        return True