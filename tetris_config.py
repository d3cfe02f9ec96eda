
CONFIG = {
    "WIDTH": 10,
    "HEIGHT": 20,
    "CELL_SIZE": 32,
    "TICK_MS": 500,
    "TICK_MIN_MS": 100,
    "TICK_ACCEL_MS": 25,
    "TICK_ACCEL_EVERY": 60,
    "DAS_MS": 170,
    "ARR_MS": 50,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
