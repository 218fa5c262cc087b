# What it does: Manages all read/write operations for the gitdnd settings file, stored inside the git directory as `gitdnd.ini`
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os
from .repository import get_git_dir

DEFAULTS = {
    'compare': {'base': ''},
    'log': {'limit': '50'},
    'backup': {'tool': 'git-dnd', 'required': 'false'},
}


def get_config_path(repo_root):  # Returns the path to the config file within the git directory
    return os.path.join(get_git_dir(repo_root), 'gitdnd.ini')


def read_config(repo_root): # Reads the configuration as a ConfigParser object, with defaults filled in
    config = configparser.ConfigParser()
    config.read_dict(DEFAULTS)
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError(f"invalid key '{key}'. Should be 'section.key'.")

    config_path = get_config_path(repo_root)
    config = configparser.ConfigParser()
    if os.path.exists(config_path):
        config.read(config_path)

    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(config_path, 'w') as configfile:
        config.write(configfile)


def get_compare_base(repo_root): # The configured comparison base branch, or None if unset
    base = read_config(repo_root).get('compare', 'base', fallback='').strip()
    return base or None


def get_log_limit(repo_root):
    return read_config(repo_root).getint('log', 'limit', fallback=50)


def get_backup_settings(repo_root): # Returns (tool name used in the backup namespace, whether a backup is mandatory)
    config = read_config(repo_root)
    tool = config.get('backup', 'tool', fallback='git-dnd').strip() or 'git-dnd'
    required = config.getboolean('backup', 'required', fallback=False)
    return tool, required
