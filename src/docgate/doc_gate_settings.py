"""Settings for the documentation delay gate."""

from dataclasses import dataclass
import json
import os

from docgate.doc_gate_exceptions import DocGateSettingsError


@dataclass
class DocGateSettings:
    """
    User-configurable timings for the documentation delay gate.

    Both values are read by the gate at request time, so changes take effect
    on the next display request.
    """
    delay_interval: float = 5.0  # Seconds to wait before showing a new message
    pause_after_clear: float = 1.0  # Seconds during which delays are skipped after a clear

    @classmethod
    def create_default(cls) -> "DocGateSettings":
        """Create a new DocGateSettings object with default values."""
        return cls(delay_interval=5.0, pause_after_clear=1.0)

    def validate(self) -> None:
        """
        Check that both timings are usable.

        Raises:
            DocGateSettingsError: If a timing is not a non-negative number
        """
        for name, value in (("delayInterval", self.delay_interval), ("pauseAfterClear", self.pause_after_clear)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise DocGateSettingsError(
                    f"Setting '{name}' must be a number",
                    {'setting': name, 'value': value}
                )

            if value < 0:
                raise DocGateSettingsError(
                    f"Setting '{name}' must not be negative",
                    {'setting': name, 'value': value}
                )

    @classmethod
    def load(cls, path: str) -> "DocGateSettings":
        """
        Load gate settings from file.

        Args:
            path: Path to the settings file

        Returns:
            DocGateSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            DocGateSettingsError: If a loaded value is invalid
        """
        # Start with default settings
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        settings.delay_interval = data.get("delayInterval", settings.delay_interval)
        settings.pause_after_clear = data.get("pauseAfterClear", settings.pause_after_clear)
        settings.validate()
        return settings

    def save(self, path: str) -> None:
        """
        Save gate settings to file.

        Args:
            path: Path to save the settings file

        Raises:
            OSError: If there's an issue creating the directory or writing the file
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        data = {
            "delayInterval": self.delay_interval,
            "pauseAfterClear": self.pause_after_clear,
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
