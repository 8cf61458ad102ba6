"""Build a generator from FLAKEID_* environment variables (or a .env file).

    FLAKEID_MACHINE_ID=3 FLAKEID_PROCESS_ID=7 python examples/from_env.py
"""

from flakeid import parse, parse2
from flakeid.config import Settings, generator_from_settings
from flakeid.core.codec import DUAL_FIELD
from flakeid.log import setup_logging

if __name__ == "__main__":
    settings = Settings()
    logger = setup_logging(settings.log_level)

    generator = generator_from_settings(settings)
    logger.info(f"Using {generator!r}")

    for _ in range(5):
        sid = generator.next_id()
        parsed = parse2(sid) if generator.layout == DUAL_FIELD else parse(sid)
        print(f"{sid} -> {parsed}")
