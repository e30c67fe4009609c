"""
Log wrapper record pivotal operations along with some information into log file or a
log socket. Only the instance handed in is patched and each instance logs through a
logger of its own, other maps of the same class are left as they are.
"""
import datetime
import functools
import logging
from logging import handlers as log_handlers

from bstmap.constants import DEFAULT_LOGGER_NAME, DEFAULT_LOG_FILE, LOG_MODES

# calls are recorded at DEBUG in debug mode, at INFO when run with -O
CALL_LOG_LEVEL = logging.DEBUG if __debug__ else logging.INFO


def _log_wrapper(func, logger: logging.Logger, level: int):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        log = 'Called: ' + func.__name__ + '('
        # !r means call __repr__ only / !s means call __str__ only
        log += ','.join(['{0!r}'.format(a) for a in args] + ['{0!s}={1!r}'.format(k, v) for k, v in
                                                             kwargs.items()])
        exception = None
        try:
            return func(*args, **kwargs)
        except Exception as error:
            exception = error
            raise
        finally:
            log += ')' if exception is None else ') {0}: {1}'.format(type(exception).__name__, exception)
            log += ' at {time}'.format(time=datetime.datetime.now().isoformat())
            logger.log(level, log)

    return wrapper


def _make_handler(log_mode, host, port, log_file) -> logging.Handler:
    if log_mode not in LOG_MODES:
        raise ValueError('Unknown log mode {mode!r}, expect one of {modes}'.format(mode=log_mode, modes=LOG_MODES))
    if log_mode == 'tcp':
        return log_handlers.SocketHandler(host=host, port=port)
    if log_mode == 'udp':
        return log_handlers.DatagramHandler(host=host, port=port)
    return logging.FileHandler(log_file or DEFAULT_LOG_FILE, mode='a')


def log_wrapper(instance, methods_to_log: tuple, log_mode='local', host=None, port=None, log_file=None,
                level=CALL_LOG_LEVEL):
    """
    :param instance: instance to be logged
    :param methods_to_log: methods of instance to be logged (both method name, parameters, time
                           of invoking will be logged)
    :param log_mode: 'local': log in local file (log.log unless log_file is given)
                     'tcp' or 'udp': log to concrete host & port
    :param host: target host if log mode is 'tcp' or 'udp'
    :param port: port of target host if log mode is 'tcp' or 'udp'
    :param log_file: file name used if log mode is 'local'
    :param level: level the calls are recorded at
    :return: wrapped instance
    """
    handler = _make_handler(log_mode, host, port, log_file)
    logger = logging.getLogger('{root}.{name}.{id:x}'.format(root=DEFAULT_LOGGER_NAME,
                                                             name=instance.__class__.__name__, id=id(instance)))
    logger.setLevel(level)
    logger.addHandler(handler)

    wrapped = []
    for name in methods_to_log:
        method = getattr(instance, name, None)
        if callable(method):
            setattr(instance, name, _log_wrapper(method, logger, level))
            wrapped.append(name)

    # bind logger with instance, so as to close log-handler when the map is dropped
    instance._logger = logger
    instance._log_handler = handler
    instance._logged_methods = tuple(wrapped)
    return instance


def release_log(instance):
    """
    Detach and close the handler log_wrapper() attached for instance, and give the
    instance its own methods back.
    """
    handler = getattr(instance, '_log_handler', None)
    if handler is None:
        return
    for name in instance._logged_methods:
        delattr(instance, name)
    instance._logger.removeHandler(handler)
    instance._logger.setLevel(logging.NOTSET)
    handler.close()
    instance._log_handler = None
    instance._logged_methods = ()
