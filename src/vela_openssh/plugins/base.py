"""Shared configuration for the OpenSSH plugins.

Both plugins accept the same authentication parameters and go through the
same setup: locate the binaries, then stage any secrets handed over as raw
strings into restricted files the binaries can read. Only validation and
the tail of the argument list differ between them.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from vela_openssh.filesystem import FileSystem, OsFileSystem
from vela_openssh.openssh import (
    DEFAULT_SSHPASS_FLAGS,
    SSHPASS_BINARY,
    TEMP_IDENTITY_FILE_PREFIX,
    TEMP_PASSPHRASE_PREFIX,
    TEMP_PASSWORD_PREFIX,
    VersionInfo,
    create_restricted_file,
    locate_binaries,
)


class OpenSSHConfig(BaseModel):
    """Authentication and environment settings shared by the plugins.

    Attributes:
        identity_file_path: Identity files to authenticate with, tried in order.
        identity_file_contents: Raw contents of an identity file. Secrets often
            arrive as environment variables, so this is staged into a file
            during setup and tried before identity_file_path.
        ssh_password: Password handed to sshpass. Prefer identity files.
        ssh_passphrase: Passphrase for the identity files, handed to sshpass.
            sshpass takes only one, so it must fit every identity file.
        sshpass_flags: Replaces the default sshpass flags when set.
        version: Version metadata exposed through environment().
        fs: Filesystem handle, the OS filesystem when left unset.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    plugin_name: ClassVar[str] = "vela-openssh"
    primary_binary: ClassVar[str] = ""
    required_binaries: ClassVar[tuple[str, ...]] = ()
    environment_prefix: ClassVar[str] = ""

    identity_file_path: list[str] = Field(default_factory=list)
    identity_file_contents: str = Field(default="", repr=False)
    ssh_password: str = Field(default="", repr=False)
    ssh_passphrase: str = Field(default="", repr=False)
    sshpass_flags: list[str] = Field(default_factory=list)
    version: VersionInfo = Field(default_factory=VersionInfo)
    fs: FileSystem | None = Field(default=None, exclude=True, repr=False)

    _binaries: dict[str, str] = PrivateAttr(default_factory=dict)
    _password_file: str = PrivateAttr(default="")
    _passphrase_file: str = PrivateAttr(default="")

    def setup(self) -> None:
        """Locate binaries and stage secrets.

        Running this again stages fresh temp files.

        Raises:
            PluginError: A MISSING_* code for the first binary not found, or
                STAGING_FAILED if a secret couldn't be written.
        """
        if self.fs is None:
            self.fs = OsFileSystem()

        self._binaries = locate_binaries(self.fs, self.required_binaries)

        if self.identity_file_contents:
            staged = create_restricted_file(
                self.fs, TEMP_IDENTITY_FILE_PREFIX, self.identity_file_contents
            )
            self.identity_file_path = [staged, *self.identity_file_path]

        if self.ssh_password:
            self._password_file = create_restricted_file(
                self.fs, TEMP_PASSWORD_PREFIX, self.ssh_password
            )

        if self.ssh_passphrase:
            self._passphrase_file = create_restricted_file(
                self.fs, TEMP_PASSPHRASE_PREFIX, self.ssh_passphrase
            )

    def use_sshpass(self) -> bool:
        """Return True if sshpass has to wrap the primary binary."""
        return bool(self.sshpass_flags or self.ssh_password or self.ssh_passphrase)

    def binary(self) -> str:
        """Return the resolved path of the binary that takes over execution."""
        if self.use_sshpass():
            return self.location(SSHPASS_BINARY)
        return self.location(self.primary_binary)

    def location(self, name: str) -> str:
        """Return where setup found ``name``, or an empty string."""
        return self._binaries.get(name, "")

    @property
    def password_file(self) -> str:
        return self._password_file

    @property
    def passphrase_file(self) -> str:
        return self._passphrase_file

    def environment(self) -> dict[str, str]:
        """Return diagnostic variables for the pipeline."""
        return {
            f"{self.environment_prefix}_VERSION": self.version.plugin,
            f"{self.environment_prefix}_COMMIT": self.version.git_commit,
        }

    def _leading_arguments(self) -> list[str]:
        # sshpass has to come first and take the real binary as its last
        # argument, so everything for the primary binary follows it.
        primary = self.location(self.primary_binary)
        if not self.use_sshpass():
            return [primary]

        args = [self.location(SSHPASS_BINARY)]
        args.extend(self.sshpass_flags or DEFAULT_SSHPASS_FLAGS)

        if self.ssh_password:
            args.extend(["-f", self._password_file])
        elif self.ssh_passphrase:
            args.extend(["-Passphrase", "-f", self._passphrase_file])

        args.append(primary)
        return args

    def _identity_arguments(self) -> list[str]:
        args: list[str] = []
        for path in self.identity_file_path:
            args.extend(["-i", path])
        return args
