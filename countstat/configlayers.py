'''
Load the report options from a JSON config file, laid over the defaults.

Keys the user's file leaves out keep their default value. If the default set
has keys the user's file does not, needs_rewrite comes back True so the caller
can suggest re-saving the file with the new keys filled in.
'''
import copy
import json
import os

from countstat import vlogging

log = vlogging.get_logger(__name__, 'configlayers')

class ConfigError(Exception):
    pass

def recursive_dict_keys(d):
    '''
    Return the set of keys of the dict and of every dict nested inside it,
    with nested keys written as parent/child.

    {'report': {'tree': True}} -> {'report', 'report/tree'}
    '''
    keys = set(d.keys())
    for (key, value) in d.items():
        if isinstance(value, dict):
            keys.update(f'{key}/{subkey}' for subkey in recursive_dict_keys(value))
    return keys

def recursive_dict_update(target, supply):
    '''
    Update target with supply in place, but merge nested dicts instead of
    replacing them, so a nested key that only the target has survives.
    '''
    for (key, value) in supply.items():
        existing = target.get(key, None)
        if isinstance(value, dict) and isinstance(existing, dict):
            recursive_dict_update(target=existing, supply=value)
        else:
            target[key] = value

def layer_json(target, supply):
    target_keys = recursive_dict_keys(target)
    supply_keys = recursive_dict_keys(supply)
    needs_rewrite = len(target_keys.difference(supply_keys)) > 0
    recursive_dict_update(target=target, supply=supply)
    return (target, needs_rewrite)

def load_file(filepath, default_config):
    '''
    Return a new dict of the user's config from filepath laid over a copy of
    default_config, and needs_rewrite. A missing file gives the defaults.
    '''
    final_config = copy.deepcopy(default_config)

    if filepath is None or not os.path.isfile(filepath):
        log.debug('No config file at %s, using defaults.', filepath)
        return (final_config, True)

    with open(filepath, 'r', encoding='utf-8') as handle:
        try:
            user_config = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigError(f'{filepath} is not valid JSON: {exc}') from exc

    if not isinstance(user_config, dict):
        raise ConfigError(f'{filepath} should hold a JSON object.')

    unknown = set(user_config).difference(default_config)
    if unknown:
        log.warning('Ignoring unknown config keys %s.', sorted(unknown))
        user_config = {key: value for (key, value) in user_config.items() if key not in unknown}

    return layer_json(target=final_config, supply=user_config)
