
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool, HasTraits, Dict, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


class JsondimeConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def config_search_path():
    "The directories searched for jsondime_config.json, highest priority first."
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    for c in _load_config_files('jsondime_config', path=config_search_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, JsondimeConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JsondimeConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)

    indent = Integer(
        2,
        help="Indentation of the json documents written by jsondime.",
    ).tag(config=True)


class AtomicPathsConfig(Dict):

    def validate_elements(self, obj, value):
        value = super(AtomicPathsConfig, self).validate_elements(obj, value)
        for k, v in value.items():
            if not k.startswith('/'):
                raise TraitError('atomic path patterns need to start with `/`')
            if v not in (True, False):
                raise TraitError('atomic path values need to be true or false')
        return self.klass(value)


class Diff(Global):

    detect_moves = Bool(
        True,
        help="turn an added value into a move of an equal removed value.",
    ).tag(config=True)

    detect_copies = Bool(
        True,
        help="turn an added value into a copy of an equal unchanged value.",
    ).tag(config=True)

    atomic_paths = AtomicPathsConfig(
        default_value={},
        help="path patterns (with * for any array index) of values to "
             "replace as a whole instead of diffing their contents.",
    ).tag(config=True)


class Patch(Global):
    pass


entrypoint_configurables = {
    'jsondime-diff': Diff,
    'jsondime-patch': Patch,
}
