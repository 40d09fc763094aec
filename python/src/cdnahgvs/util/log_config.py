'''
Created on Feb 2, 2026
'''

_FORMAT = '%(levelname)s: %(name)s::%(module)s:%(lineno)s: %(message)s'


class LogConfig(object):
    '''
    dictConfig settings for the command line tools. Package loggers log at DEBUG, everything else at WARNING.
    '''

    def __init__(self, log_file: str = 'cdnahgvs.log', level: str = 'DEBUG'):
        '''
        Constructor
        '''
        self.stdout_config = self._get_config({
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout'
        }, _FORMAT, level)

        self.file_config = self._get_config({
            'formatter': 'standard',
            'class': 'logging.FileHandler',
            'filename': log_file,
            'mode': 'a'
        }, '%(asctime)s: ' + _FORMAT, level)

    def _get_config(self, handler: dict, log_format: str, level: str) -> dict:
        return {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'standard': {
                    'format': log_format
                },
            },
            'handlers': {
                'default': handler,
            },
            'loggers': {
                '': {  # root logger
                    'level': 'WARNING',
                    'handlers': ['default'],
                    'propagate': False
                },
                'cdnahgvs': {
                    'level': level,
                    'handlers': ['default'],
                    'propagate': False,
                },
                '__main__': {
                    'level': level,
                    'handlers': ['default'],
                    'propagate': False,
                }
            }
        }
