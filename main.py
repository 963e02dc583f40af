"""Evaluate and verify a VDF on an example challenge, with timings."""

import argparse
import logging
import time
from typing import List, Optional

from vdf_engine.challenge import VdfChallengeBuilder
from vdf_engine.protocol_constants import EXAMPLE_MODULUS, MIMC_DIFFICULTY, TEST_HASH
from vdf_engine.utils import EnvironmentManager, EnvironmentVariables, configure_logging
from vdf_engine.vdf import VdfSchemeFactory, VdfSchemeType
from vdf_engine.vdf.constants import MIMC_MODULUS

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Evaluate a verifiable delay function and verify the witness."
    )
    parser.add_argument(
        "--scheme",
        choices=[scheme.value for scheme in VdfSchemeType],
        default=VdfSchemeType.SQRT.value,
        help="VDF construction to run (default: sqrt)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Number of sequential steps (default: VDF_DIFFICULTY for sqrt, 8192*512 for mimc)",
    )
    parser.add_argument(
        "--hash",
        type=str,
        default=TEST_HASH,
        help="Hex hash reduced into the seed",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: VDF_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Evaluate the VDF, verify the witness and report whether it checked out."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    scheme_type = VdfSchemeType(args.scheme)
    if scheme_type == VdfSchemeType.SQRT:
        modulus = EXAMPLE_MODULUS
        steps = args.steps if args.steps is not None else EnvironmentManager.get_int(EnvironmentVariables.DIFFICULTY)
    else:
        modulus = MIMC_MODULUS
        steps = args.steps if args.steps is not None else MIMC_DIFFICULTY

    challenge = (
        VdfChallengeBuilder()
        .set_seed_from_hex(args.hash)
        .set_steps(steps)
        .set_modulus(modulus)
        .build()
    )
    scheme = VdfSchemeFactory.create(scheme_type, challenge.get_modulus())
    logger.info("Running %s VDF with %d steps", scheme_type.value, steps)

    print(f"Challenge (seed) is: {hex(challenge.get_seed())}")

    print("Evaluating VDF...")
    start_time = time.time()
    witness = scheme.eval(challenge.get_seed(), challenge.get_steps())
    eval_time = time.time() - start_time
    print(f"Response is: {hex(witness)}, elapsed: {eval_time:.4f} seconds")

    print("Verifying VDF...")
    start_time = time.time()
    is_verified = scheme.verify(challenge.get_seed(), challenge.get_steps(), witness)
    verify_time = time.time() - start_time
    print(f"Verified: {is_verified}, elapsed: {verify_time:.4f} seconds")

    if not is_verified:
        logger.error("Witness did not verify")
        return 1
    return 0


if __name__ == "__main__":
    exit(main())
