"""
generar_datos.py
================

OBJETIVO
--------
Generar un archivo patient_data.csv para correr la simulacion sin datos reales.

FLUJO DE USO
------------
Desde la raiz del repo:
    python tools/generar_datos.py
    python tools/generar_datos.py --muestras 5000 --semilla 7 --salida patient_data.csv

El script:
  - Crea una FuenteSimulada (HR y SpO2 con ruido uniforme)
  - Toma N muestras y arma un DataFrame
  - Guarda el CSV SIN header y SIN indice (formato "<hr>,<spo2>" por linea)

IMPORTANTE
----------
- Este script NO procesa las muestras: solo GENERA Y GUARDA.
- El formato de salida es el mismo que espera FuenteCSV.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pandas as pd


# Para poder importar patient_monitor sin instalar el paquete
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from patient_monitor.config.settings import SETTINGS  # noqa: E402
from patient_monitor.controller.fuentes import FuenteDatos, FuenteSimulada  # noqa: E402


# ============================================================
# 1) CONFIGURACION
# ============================================================

N_MUESTRAS = 3000           # 3 s simulados a 1 kHz
PROB_DESCONEXION = 0.001    # probabilidad de SpO2 = 0 por muestra


# ============================================================
# 2) GENERACION
# ============================================================

def construir_dataframe(fuente: FuenteDatos, n_muestras: int) -> pd.DataFrame:
    """Toma n_muestras de la fuente y las arma en un DataFrame (hr, spo2)."""
    if n_muestras < 0:
        raise ValueError("n_muestras debe ser >= 0")

    filas = []
    for _ in range(n_muestras):
        muestra = fuente.leer_muestra()
        filas.append({"hr": muestra.hr, "spo2": muestra.spo2})

    return pd.DataFrame(filas, columns=["hr", "spo2"])


def generar_csv(ruta: str | Path, n_muestras: int, fuente: FuenteDatos) -> Path:
    """
    Escribe n_muestras de la fuente en `ruta`.

    Retorna el Path del archivo generado.
    """
    df = construir_dataframe(fuente, n_muestras)

    ruta = Path(ruta)
    ruta.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(ruta, header=False, index=False, lineterminator="\n")
    return ruta


# ============================================================
# 3) MAIN
# ============================================================

def main(argv=None) -> None:
    ap = argparse.ArgumentParser(description="Genera un patient_data.csv simulado.")
    ap.add_argument("--salida", default=SETTINGS.ruta_csv, help="Ruta del CSV a generar")
    ap.add_argument("--muestras", type=int, default=N_MUESTRAS, help="Cantidad de muestras")
    ap.add_argument("--semilla", type=int, default=None, help="Semilla del generador")
    ap.add_argument("--prob-desconexion", type=float, default=PROB_DESCONEXION,
                    help="Probabilidad de SpO2 = 0 por muestra")
    args = ap.parse_args(argv)

    fuente = FuenteSimulada(prob_desconexion=args.prob_desconexion, semilla=args.semilla)
    ruta = generar_csv(args.salida, args.muestras, fuente)

    print(f"[OK] CSV generado: {ruta}")
    print(f"[OK] Filas guardadas: {args.muestras}")


if __name__ == "__main__":
    main()
