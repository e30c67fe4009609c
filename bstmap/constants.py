from collections import namedtuple

__all__ = ['DEFAULT_LOGGER_NAME', 'DEFAULT_LOG_FILE', 'LOG_MODES', 'METHODS_TO_LOG', 'MapConf']

DEFAULT_LOGGER_NAME = 'bstmap'

# used by log_wrapper when log mode is 'local'
DEFAULT_LOG_FILE = 'log.log'

LOG_MODES = ('local', 'tcp', 'udp')

METHODS_TO_LOG = (
    'get',
    'get_result',
    'insert',
    'delete',
    'remove',
    'clear'
)

MapConf = namedtuple('MapConf', [
    'synchronized',  # guard the map with a reader-writer lock
    'log_mode',  # None, 'local', 'tcp' or 'udp'
    'host',  # target host of socket logging
    'port',  # target port of socket logging
    'log_file',  # file name used by 'local' logging
])
