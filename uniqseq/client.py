# uniqseq/client.py
# Client for the sequence service: fetch a sequence via /take, check it
# locally, then ask the service to validate it via /validate.

import argparse
import logging
import time

import requests

from uniqseq import config
from uniqseq.check import check

ORACLE = f'http://{config.HOST}:{config.PORT}'

logger = logging.getLogger('uniqseq.client')


def fetch_sequence(range_, count, seed=None, mode=None, base=ORACLE):
    params = {'range': range_, 'count': count}
    if seed is not None:
        params['seed'] = seed
    if mode is not None:
        params['mode'] = mode
    r = requests.get(base + '/take', params=params, timeout=5)
    r.raise_for_status()
    return r.json()['values']


def validate_remote(values, base=ORACLE):
    r = requests.post(base + '/validate', json={'values': values}, timeout=5)
    r.raise_for_status()
    return r.json()


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--range', type=int, default=1000, help='universe size')
    parser.add_argument('--count', type=int, default=1000, help='number of values to fetch')
    parser.add_argument('--seed', type=int, default=None, help='seed (service default if omitted)')
    parser.add_argument('--mode', default=None, help='qpr | naive | bitmap')
    parser.add_argument('--base', default=ORACLE, help='service base url')
    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))

    t0 = time.time()
    print(f"[client] Fetching {args.count} values from [0, {args.range})...")
    values = fetch_sequence(args.range, args.count, seed=args.seed, mode=args.mode, base=args.base)
    print(f"[client] first values: {values[:10]}")
    local = check(values)
    if local:
        print("[client] Local check: sequence is duplicate-free")
    else:
        print(f"[client] Local check: seq[{local.first}] == seq[{local.second}] == {local.value}")
    print("[client] Validate response:", validate_remote(values, base=args.base))
    print(f"[client] Done in {time.time()-t0:.2f}s")
