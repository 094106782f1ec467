# nocr_etl/utils.py
import os
import time


def ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def sleep_delay(sec: float):
    if sec > 0:
        time.sleep(sec)
