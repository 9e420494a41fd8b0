"""日志封装：统一格式，并在日志中隐藏 API key"""
import logging


class SecretMaskFilter(logging.Filter):
    """把日志消息中出现的 API key 替换为 ***"""

    def __init__(self):
        super().__init__()
        self.secrets = set()

    def filter(self, record):
        if not self.secrets:
            return True
        message = record.getMessage()
        masked = message
        for secret in self.secrets:
            masked = masked.replace(secret, '***')
        if masked != message:
            record.msg = masked
            record.args = ()
        return True


def get_logger(name=__name__, level=logging.INFO, secret=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s')
        h.setFormatter(fmt)
        logger.addHandler(h)
    if secret:
        mask = next((f for f in logger.filters if isinstance(f, SecretMaskFilter)), None)
        if mask is None:
            mask = SecretMaskFilter()
            logger.addFilter(mask)
        mask.secrets.add(secret)
    # 配置文件中的级别是字符串，如 "DEBUG"
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    return logger
