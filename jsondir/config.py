"""
--------------
jsondir.config
--------------

Loads the command line configuration from a YAML file.

Example configuration file:

.. code-block:: yaml

    data_dir: /var/lib/jsondir
    log_level: DEBUG

"""
import logging
import yaml


DEFAULTS = {
    'data_dir': './db',
    'log_level': 'INFO',
}


class ConfigError(Exception):
    """Raised when the configuration file cannot be loaded or has invalid values.
    """
    pass


def load_config(path=None):
    """Loads the configuration, filling in the defaults for the missing values.

    :param path: ``str``, path to the YAML configuration file. If ``None``, only the defaults are returned.

    Returns a ``dict`` with the configuration values.
    """
    config = dict(DEFAULTS)
    if path is None:
        return config

    try:
        with open(path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError('Unable to read config file %s: %s' % (path, e)) from e
    except yaml.YAMLError as e:
        raise ConfigError('Invalid YAML in config file %s: %s' % (path, e)) from e

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ConfigError('Config file %s must contain a mapping' % path)

    unknown = set(loaded) - set(DEFAULTS)
    if unknown:
        raise ConfigError('Unknown config keys: %s' % ', '.join(sorted(unknown)))

    config.update(loaded)
    if not isinstance(config['data_dir'], str) or not config['data_dir']:
        raise ConfigError('data_dir must be a non-empty string')
    config['log_level'] = get_log_level(config['log_level'])
    return config


def get_log_level(level):
    """Converts a level name (``'debug'``, ``'INFO'``...) to the :mod:`logging` level name.
    """
    name = str(level).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigError('Invalid log level: %s' % level)
    return name
