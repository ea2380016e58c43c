# uniqseq/app.py
# Flask service exposing /take, /validate and /info
# Every request builds its own generator; nothing is shared between requests.

from flask import Flask, jsonify, request

from uniqseq import config
from uniqseq.check import check
from uniqseq.errors import UniqSeqError
from uniqseq.rng_unique import SEQUENCE_VERSION, UniqueSeq
from uniqseq.strategies import make_generator

import os, time, logging

app = Flask(__name__)

MASK32 = (1 << 32) - 1

# Setup logging
logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger('uniqseq.app')


def derive_seed():
    """
    Derive a 32-bit seed integer according to config.SEED_MODE.
      - 'fixed'  -> config.SEED, or 1 when it is None
      - 'random' -> os.urandom(4)
      - 'time'   -> current time in seconds or ms (config.TIME_GRANULARITY)
    """
    mode = (config.SEED_MODE or 'fixed').lower()
    if mode == 'fixed':
        seed = int(config.SEED) & MASK32 if config.SEED is not None else 0x1
        logger.debug(f"Using fixed SEED: {seed:08x}")
        return seed
    elif mode == 'random':
        seed = int.from_bytes(os.urandom(4), 'big')
        logger.debug(f"Using random SEED (os.urandom): {seed:08x}")
        return seed
    elif mode == 'time':
        if config.TIME_GRANULARITY == 'ms':
            t = int(time.time() * 1000)
        else:
            t = int(time.time())
        seed = t & MASK32
        logger.debug(f"Using time-derived SEED (granu={config.TIME_GRANULARITY}): {seed:08x}")
        return seed
    else:
        logger.warning(f"Unknown SEED_MODE '{config.SEED_MODE}', falling back to SEED 1")
        return 0x1


def _bad_request(reason):
    return jsonify({'ok': False, 'reason': reason}), 400


def _int_arg(name, default=None):
    raw = request.args.get(name)
    if raw is None:
        if default is None:
            raise ValueError(f"need {name}")
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"bad {name}: {raw!r}")


@app.route('/take', methods=['GET'])
def take():
    try:
        range_ = _int_arg('range')
        count = _int_arg('count', min(max(range_, 0), config.MAX_TAKE))
        seed = _int_arg('seed') if request.args.get('seed') is not None else derive_seed()
    except ValueError as e:
        return _bad_request(str(e))
    if seed < 0:
        return _bad_request(f"seed must be >= 0, got {seed}")
    mode = request.args.get('mode', config.GENERATOR_MODE)
    if count < 0 or count > config.MAX_TAKE:
        return _bad_request(f"count must be in [0, {config.MAX_TAKE}]")
    if mode != 'qpr' and range_ > config.MAX_BASELINE_RANGE:
        return _bad_request(f"range above {config.MAX_BASELINE_RANGE} only supported by qpr")
    try:
        generator = make_generator(mode, range_, seed)
        values = generator.take(count)
    except (UniqSeqError, ValueError) as e:
        return _bad_request(str(e))
    logger.info(f"take mode={mode} range={range_} seed={seed:08x} count={count}")
    return jsonify({'mode': mode, 'range': range_, 'seed': seed, 'values': values})


@app.route('/validate', methods=['POST'])
def validate():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('values'), list):
        return _bad_request('need values')
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in data['values']):
        return _bad_request('bad values')
    result = check(data['values'])
    if not result:
        logger.info(f"duplicate: seq[{result.first}] == seq[{result.second}] == {result.value}")
    return jsonify(result.to_dict())


@app.route('/info', methods=['GET'])
def info():
    try:
        generator = UniqueSeq(_int_arg('range'))
    except (UniqSeqError, ValueError) as e:
        return _bad_request(str(e))
    return jsonify({'range': generator.range, 'prime': generator.prime,
                    'intermediate_offset': generator.intermediate_offset,
                    'clamped': generator.clamped, 'version': SEQUENCE_VERSION})


if __name__ == '__main__':
    logger.info(f"Starting sequence service at http://{config.HOST}:{config.PORT} "
                f"with GENERATOR_MODE={config.GENERATOR_MODE} SEED_MODE={config.SEED_MODE}")
    app.run(host=config.HOST, port=config.PORT, debug=False)
