# roster/config.py
"""Настройки приложения: веса итоговой оценки, пороги и логирование."""
import logging

# --- КОНФИГУРАЦИЯ ---
ASSIGNMENT_WEIGHT = 0.4
EXAM_WEIGHT = 0.6

MIN_MARK = 0
MAX_MARK = 100

HIGH_ACHIEVER_THRESHOLD = 80
PASS_THRESHOLD = 50.0
MID_BAND = (60, 70)

LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
