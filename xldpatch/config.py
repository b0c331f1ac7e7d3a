
import codecs
import os

from traitlets import Unicode, Enum, Integer, Bool, HasTraits, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import LOG_LEVELS
from .patch_format import DEFAULT_TEXT_ENCODING, PatchOp


CONFIG_FILENAME = 'xldpatch_config'


class XldpatchConfigurable(HasTraits):

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


def config_path():
    """Directories searched for config files, in descending priority order."""
    path = [os.getcwd()]
    if os.environ.get('XLDPATCH_CONFIG_DIR'):
        path.append(os.environ['XLDPATCH_CONFIG_DIR'])
    path.append(os.path.join(os.path.expanduser('~'), '.xldpatch'))
    return path


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


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    disk_config = {}
    for c in _load_config_files(CONFIG_FILENAME, path=config_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, XldpatchConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class TextEncoding(Unicode):
    """A codec name known to Python."""

    def validate(self, obj, value):
        value = super(TextEncoding, self).validate(obj, value)
        try:
            codecs.lookup(value)
        except LookupError:
            raise TraitError('unknown text encoding: %r' % value)
        return value


class Global(XldpatchConfigurable):

    log_level = Enum(
        LOG_LEVELS,
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Patching(Global):

    text_encoding = TextEncoding(
        DEFAULT_TEXT_ENCODING,
        help="Code page of the strings in text table subfiles.",
    ).tag(config=True)


class Show(_Patching):

    use_color = Bool(
        True,
        help="Use ANSI color code escapes for text output.",
    ).tag(config=True)

    max_bytes = Integer(
        32,
        help="Number of payload bytes to show per operation; -1 shows all.",
    ).tag(config=True)


class Merge(Global):
    pass


class Apply(_Patching):

    raw = Bool(
        False,
        help="Treat the target as a single raw file instead of an archive.",
    ).tag(config=True)


class Export(Global):

    comment = Unicode(
        None,
        allow_none=True,
        help="If set, a comment operation with this text starts the exported patch.",
    ).tag(config=True)


class Add(_Patching):

    op_type = Enum(
        sorted(n for c, n in PatchOp.names.items() if c != PatchOp.COMMENT),
        'replace',
        help="Type of the operation built from the input file.",
    ).tag(config=True)


class XlpShow(Show):
    pass

class XlpMerge(Merge):
    pass

class XlpApply(Apply):
    pass

class XlpExport(Export):
    pass

class XlpAdd(Add):
    pass


entrypoint_configurables = {
    'xlpshow': XlpShow,
    'xlpmerge': XlpMerge,
    'xlpapply': XlpApply,
    'xlpexport': XlpExport,
    'xlpadd': XlpAdd,
}
