# utils/logging/logging_handlers.py
import datetime
import os
import time

from logging.handlers import TimedRotatingFileHandler


class CustomTimedRotatingFileHandler(TimedRotatingFileHandler):
    """
    Ротация по времени ИЛИ по размеру файла.

    Старые файлы получают полный временной штамп в имени:
    player_cmdline_2024-01-31_23-59-59.log
    """

    def __init__(self, filename, when='midnight', interval=1, maxBytes=10485760, backupCount=5,
                 encoding=None, delay=False, utc=False, atTime=None, log_dir='logs'):
        self.maxBytes = maxBytes
        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)
        super().__init__(os.path.join(self.log_dir, filename), when, interval, backupCount,
                         encoding, delay, utc, atTime)

    def getLogFileName(self, current_time):
        base_filename, file_extension = os.path.splitext(self.baseFilename)
        return f"{base_filename}_{current_time.strftime('%Y-%m-%d_%H-%M-%S')}{file_extension}"

    def shouldRollover(self, record):
        if super().shouldRollover(record):
            return True
        # файла ещё нет (delay=True) - размер не проверяем
        if not os.path.exists(self.baseFilename):
            return False
        return os.stat(self.baseFilename).st_size >= self.maxBytes

    def getFilesToDelete(self):
        prefix = os.path.splitext(os.path.basename(self.baseFilename))[0] + "_"
        backups = sorted(
            os.path.join(self.log_dir, name)
            for name in os.listdir(self.log_dir)
            if name.startswith(prefix)
        )
        if len(backups) <= self.backupCount:
            return []
        return backups[:len(backups) - self.backupCount]

    def doRollover(self):
        if self.stream:
            self.stream.close()
            self.stream = None

        dfn = self.getLogFileName(datetime.datetime.now())
        if os.path.exists(dfn):
            os.remove(dfn)
        self.rotate(self.baseFilename, dfn)
        if self.backupCount > 0:
            for old in self.getFilesToDelete():
                os.remove(old)
        if not self.delay:
            self.stream = self._open()

        now = int(time.time())
        new_rollover_at = self.computeRollover(now)
        while new_rollover_at <= now:
            new_rollover_at += self.interval
        self.rolloverAt = new_rollover_at
