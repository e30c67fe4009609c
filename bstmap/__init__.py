import logging

from bstmap.constants import DEFAULT_LOGGER_NAME, LOG_MODES, METHODS_TO_LOG, MapConf
from bstmap.functional import delete, empty, get, get_result, insert
from bstmap.node import BSTNode
from bstmap.synchronized import SynchronizedTreeMap
from bstmap.tree import BinaryTreeMap, KeyNotFoundError
from bstmap.wrapper import log_wrapper, release_log

__version__ = '0.1.0'

__all__ = ('BinaryTreeMap', 'SynchronizedTreeMap', 'BSTNode', 'KeyNotFoundError', 'MapConf',
           'empty', 'get', 'get_result', 'insert', 'delete', 'open_map', 'log_wrapper', 'release_log')

logger = logging.getLogger(DEFAULT_LOGGER_NAME)


def open_map(*, synchronized=False, **kwargs):
    """
    :param synchronized: guard the map with a reader-writer lock, for maps shared by threads.
    :param kwargs: log mode: 'log'='local' (log in local file, 'log_file' or log.log)
                             'log'='tcp' or 'udp': log to concrete 'host' & 'port'
    """
    conf = MapConf(synchronized=synchronized,
                   log_mode=kwargs.pop('log', None),
                   host=kwargs.pop('host', None),
                   port=kwargs.pop('port', None),
                   log_file=kwargs.pop('log_file', None))
    if kwargs:
        raise TypeError('Unexpected options: {opts}'.format(opts=', '.join(sorted(kwargs))))

    tree_map = SynchronizedTreeMap() if conf.synchronized else BinaryTreeMap()

    if conf.log_mode == 'tcp' or conf.log_mode == 'udp':
        if conf.host is None or conf.port is None:
            raise ValueError('Host and port of Log Socket should be specified')
        tree_map = log_wrapper(tree_map, METHODS_TO_LOG, log_mode=conf.log_mode, host=conf.host, port=conf.port)
    elif conf.log_mode == 'local':
        tree_map = log_wrapper(tree_map, METHODS_TO_LOG, log_mode=conf.log_mode, log_file=conf.log_file)
    elif conf.log_mode is not None:
        raise ValueError('Unknown log mode {mode!r}, expect one of {modes}'.format(mode=conf.log_mode,
                                                                                  modes=LOG_MODES))

    tree_map.map_conf = conf
    logger.info('Opened {name} ({conf}).'.format(name=tree_map.__class__.__name__, conf=conf))
    return tree_map
