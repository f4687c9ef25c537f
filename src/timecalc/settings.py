"""
Settings for timecalc
"""

import os
from configparser import RawConfigParser


default_config_home = os.path.normpath('~/.config')


class Settings(object):
    """Configurable settings for timecalc."""

    verbose = False
    debug = False

    # http://standards.freedesktop.org/basedir-spec/basedir-spec-latest.html

    def get_config_dir(self):
        envar_home = os.environ.get('TIMECALC_HOME')
        if envar_home is not None:
            return os.path.expanduser(envar_home)
        xdg = os.environ.get('XDG_CONFIG_HOME') or default_config_home
        return os.path.join(os.path.expanduser(xdg), 'timecalc')

    def get_config_file(self):
        return os.path.join(self.get_config_dir(), 'timecalcrc')

    def _config(self):
        config = RawConfigParser()
        config.add_section('timecalc')
        config.set('timecalc', 'verbose', str(self.verbose))
        config.set('timecalc', 'debug', str(self.debug))
        return config

    def load(self, filename=None):
        """Load settings from a file; missing files leave the defaults."""
        config = self._config()
        if filename is None:
            filename = self.get_config_file()
        config.read([filename])
        self.verbose = config.getboolean('timecalc', 'verbose')
        self.debug = config.getboolean('timecalc', 'debug')

    def save(self, filename):
        config = self._config()
        with open(filename, 'w') as f:
            config.write(f)
