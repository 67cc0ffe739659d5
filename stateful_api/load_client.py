"""
Cliente de carga: dispara peticiones concurrentes contra un servicio
en marcha y verifica que ningún valor se repita.

    stateful-load --target counter -n 1000 -c 50
    stateful-load --target courses -n 100 -c 20 -u http://localhost:8080
"""

import argparse
import re
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

import requests

COUNT_RE = re.compile(r"called (\d+) times")


def _count_once(session: requests.Session, url: str) -> int:
    resp = session.get(url)
    resp.raise_for_status()
    match = COUNT_RE.search(resp.text)
    if match is None:
        raise ValueError(f"Respuesta inesperada de /count: {resp.text!r}")
    return int(match.group(1))


def _create_once(session: requests.Session, url: str, i: int) -> int:
    resp = session.post(url, json={"name": f"Curso {i}", "price": i, "instructor": "load"})
    resp.raise_for_status()
    return resp.json()["id"]


def hammer_counter(
    base_url: str,
    requests_total: int,
    workers: int,
    session: Optional[requests.Session] = None,
) -> List[int]:
    """Llama ``/count`` ``requests_total`` veces y devuelve cada valor reportado."""
    session = session or requests.Session()
    url = base_url.rstrip("/") + "/count"
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_count_once, session, url) for _ in range(requests_total)]
        return [f.result() for f in futures]


def hammer_courses(
    base_url: str,
    requests_total: int,
    workers: int,
    session: Optional[requests.Session] = None,
) -> List[int]:
    """Crea ``requests_total`` cursos en paralelo y devuelve los ids asignados."""
    session = session or requests.Session()
    url = base_url.rstrip("/") + "/courses"
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_create_once, session, url, i) for i in range(requests_total)]
        return [f.result() for f in futures]


def check_unique(values: Iterable[int]) -> bool:
    return all(n == 1 for n in Counter(values).values())


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Cliente de carga concurrente")
    parser.add_argument(
        "-t",
        "--target",
        choices=["counter", "courses"],
        default="counter",
        help="Servicio a probar",
    )
    parser.add_argument(
        "-n",
        "--requests",
        type=int,
        default=1000,
        help="Número total de peticiones",
    )
    parser.add_argument(
        "-c",
        "--clients",
        type=int,
        default=50,
        help="Número de clientes en paralelo",
    )
    parser.add_argument(
        "-u",
        "--url",
        type=str,
        default="http://localhost:8080",
        help="URL base del servicio",
    )
    args = parser.parse_args(argv)

    hammer = hammer_counter if args.target == "counter" else hammer_courses

    print(f"Iniciando carga: {args.requests} peticiones con {args.clients} clientes -> {args.target}")
    start = time.perf_counter()
    values = hammer(args.url, args.requests, args.clients)
    elapsed = time.perf_counter() - start

    duplicates = len(values) - len(set(values))
    throughput = len(values) / elapsed if elapsed > 0 else 0.0

    print(f"Tiempo: {elapsed:.4f} s")
    print(f"Peticiones: {len(values)}")
    print(f"Máximo reportado: {max(values) if values else 0}")
    print(f"Duplicados: {duplicates}")
    print(f"Throughput: {throughput:.2f} req/s")
    return 0 if duplicates == 0 else 1


def entry() -> None:
    raise SystemExit(main())
