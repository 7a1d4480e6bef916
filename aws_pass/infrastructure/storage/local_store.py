"""Local store directory adapter.

Implements LocalStoreProtocol with plain files under the store directory:

    ~/.aws-pass/
        .aws-credentials   AWS shared-credentials INI ([default] section)
        .mfa-serial        MFA device serial/ARN on the first line

Files are written owner-only (0600) inside an owner-only directory (0700).
The credentials file also accepts the bare ``key=value`` layout without a
section header written by older versions of the tool.
"""

import configparser
import os
from pathlib import Path

from aws_pass.core.enums import ErrorCode
from aws_pass.core.result import Failure, Result, Success
from aws_pass.domain.errors import ConfigurationError
from aws_pass.domain.value_objects import IdentityCredentials

CREDENTIALS_SECTION = "default"
ACCESS_KEY_ID_OPTION = "aws_access_key_id"
SECRET_ACCESS_KEY_OPTION = "aws_secret_access_key"


def read_first_line(path: Path) -> Result[str, ConfigurationError]:
    """Read the first line of a file, trimmed.

    Args:
        path: File to read.

    Returns:
        Success(line) with surrounding whitespace removed.
        Failure(ConfigurationError) if the file is missing, unreadable or the
            first line is blank.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Failure(
            error=ConfigurationError(
                code=ErrorCode.CONFIG_FILE_MISSING,
                message=f"Required file not found: {path}",
                path=str(path),
            )
        )
    except OSError as e:
        return Failure(
            error=ConfigurationError(
                code=ErrorCode.CONFIG_FILE_INVALID,
                message=f"Unable to read file: {path}",
                path=str(path),
                details={"error": str(e)},
            )
        )

    lines = text.splitlines()
    first_line = lines[0].strip() if lines else ""
    if not first_line:
        return Failure(
            error=ConfigurationError(
                code=ErrorCode.CONFIG_FILE_INVALID,
                message=f"File is empty: {path}",
                path=str(path),
            )
        )
    return Success(value=first_line)


def render_credentials_file(identity: IdentityCredentials) -> str:
    """Render identity credentials in AWS shared-credentials format."""
    return (
        f"[{CREDENTIALS_SECTION}]\n"
        f"{ACCESS_KEY_ID_OPTION} = {identity.access_key_id}\n"
        f"{SECRET_ACCESS_KEY_OPTION} = {identity.secret_access_key}\n"
    )


def parse_credentials_file(text: str) -> IdentityCredentials | None:
    """Parse identity credentials from INI text.

    Returns:
        IdentityCredentials, or None if either key is missing or blank.
    """
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read_string(text)
    except configparser.MissingSectionHeaderError:
        parser.read_string(f"[{CREDENTIALS_SECTION}]\n{text}")

    if not parser.has_section(CREDENTIALS_SECTION):
        return None

    section = parser[CREDENTIALS_SECTION]
    access_key_id = section.get(ACCESS_KEY_ID_OPTION, "").strip()
    secret_access_key = section.get(SECRET_ACCESS_KEY_OPTION, "").strip()
    if not access_key_id or not secret_access_key:
        return None
    return IdentityCredentials(
        access_key_id=access_key_id, secret_access_key=secret_access_key
    )


def write_private_file(path: Path, text: str) -> None:
    """Write text to a file readable only by its owner."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(text)


class LocalStoreFiles:
    """Store directory backed by local files.

    Args:
        store_dir: Store directory.
        credentials_file_name: Identity credentials file name.
        mfa_serial_file_name: MFA serial file name.
    """

    def __init__(
        self,
        store_dir: Path,
        *,
        credentials_file_name: str = ".aws-credentials",
        mfa_serial_file_name: str = ".mfa-serial",
    ) -> None:
        self.store_dir = store_dir
        self.credentials_file = store_dir / credentials_file_name
        self.mfa_serial_file = store_dir / mfa_serial_file_name

    def initialize(
        self, identity: IdentityCredentials, mfa_serial: str
    ) -> Result[Path, ConfigurationError]:
        """Create the store directory and write both store files.

        Refuses to touch a directory that already has content, so an
        initialized store is never overwritten.

        Returns:
            Success(store_dir) when written.
            Failure(ConfigurationError) if the directory is not empty, the
                path is not a directory, or the serial is blank.
        """
        serial = mfa_serial.strip()
        if not serial:
            return Failure(
                error=ConfigurationError(
                    code=ErrorCode.CONFIG_FILE_INVALID,
                    message="MFA serial must be non-empty",
                    path=str(self.mfa_serial_file),
                )
            )

        if self.store_dir.exists():
            if not self.store_dir.is_dir():
                return Failure(
                    error=ConfigurationError(
                        code=ErrorCode.CONFIG_FILE_INVALID,
                        message=f"Store path is not a directory: {self.store_dir}",
                        path=str(self.store_dir),
                    )
                )
            if any(self.store_dir.iterdir()):
                return Failure(
                    error=ConfigurationError(
                        code=ErrorCode.STORE_ALREADY_INITIALIZED,
                        message=f"Store already initialized, not overwriting: {self.store_dir}",
                        path=str(self.store_dir),
                    )
                )

        self.store_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
        write_private_file(self.credentials_file, render_credentials_file(identity))
        write_private_file(self.mfa_serial_file, f"{serial}\n")
        return Success(value=self.store_dir)

    def read_mfa_serial(self) -> Result[str, ConfigurationError]:
        """Read the MFA serial from the first line of the serial file."""
        return read_first_line(self.mfa_serial_file)

    def read_identity(self) -> Result[IdentityCredentials, ConfigurationError]:
        """Read identity credentials from the credentials file."""
        try:
            text = self.credentials_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            return Failure(
                error=ConfigurationError(
                    code=ErrorCode.CONFIG_FILE_MISSING,
                    message=f"Credentials file not found: {self.credentials_file}",
                    path=str(self.credentials_file),
                )
            )

        try:
            identity = parse_credentials_file(text)
        except configparser.Error as e:
            return Failure(
                error=ConfigurationError(
                    code=ErrorCode.CONFIG_FILE_INVALID,
                    message=f"Credentials file is malformed: {self.credentials_file}",
                    path=str(self.credentials_file),
                    details={"error": str(e)},
                )
            )

        if identity is None:
            return Failure(
                error=ConfigurationError(
                    code=ErrorCode.CONFIG_FILE_INVALID,
                    message=(
                        f"Credentials file must define {ACCESS_KEY_ID_OPTION} and "
                        f"{SECRET_ACCESS_KEY_OPTION}: {self.credentials_file}"
                    ),
                    path=str(self.credentials_file),
                )
            )
        return Success(value=identity)
