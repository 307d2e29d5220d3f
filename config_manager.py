"""Configuration management for the solver sweep.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize sweep settings and output naming.

File format (high-level)
------------------------
- experiment_settings: board sizes, constraint modes, timed runs per size and
  output directory.
- output_settings: filename stamping (date, run tag) and whether to plot.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist the sweep configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, "r") as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, "w") as f:
            json.dump(self.config, f, indent=2)

    def get_experiment_settings(self):
        """Return sweep settings (n_values, line_modes, runs_per_n, output_dir)."""
        return self.config.get("experiment_settings", {})

    def get_output_settings(self):
        """Return output naming and plotting switches."""
        return self.config.get("output_settings", {})

    def get_line_modes(self):
        """Return the constraint modes to run as booleans (default: both)."""
        modes = self.get_experiment_settings().get("line_modes", [True, False])
        return [bool(m) for m in modes]

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
