"""
Este modulo decodifica las lineas del archivo de datos del paciente.

Objetivo:
- Convertir una linea de texto "<hr>,<spo2>" en un objeto Muestra.

Contrato esperado (archivo -> PC):
  <hr>,<spo2>

Ejemplo:
  72,98

Notas:
- No hay header ni prefijo de protocolo.
- Se aceptan espacios al inicio/fin de la linea y despues de la coma.
- Cada entero puede llevar signo (+/-) y solo digitos ASCII 0-9.
- El HR no se valida aqui (se satura en el modelo).
"""

import re

from patient_monitor.model.muestra import Muestra


_PATRON_LINEA = re.compile(r"\s*([+-]?[0-9]+),\s*([+-]?[0-9]+)\s*")


def es_linea_vacia(linea: str) -> bool:
    """True si la linea solo contiene espacios o saltos de linea."""
    return linea.strip() == ""


def decodificar_linea(linea: str) -> Muestra:
    """
    Decodifica una linea "<hr>,<spo2>" y retorna una Muestra.

    Parametros:
    - linea: string leido del archivo (puede incluir el salto de linea)

    Retorna:
    - Muestra con ambos campos convertidos a int

    Errores:
    - ValueError si el formato no coincide o si falla la conversion de tipos
    """
    coincidencia = _PATRON_LINEA.fullmatch(linea)
    if coincidencia is None:
        raise ValueError(f"Linea invalida: se esperaba '<int>,<int>', llego {linea!r}")

    hr_str, spo2_str = coincidencia.groups()

    try:
        hr = int(hr_str)
        spo2 = int(spo2_str)
    except ValueError as e:
        raise ValueError("Linea invalida: conversion de tipos fallo") from e

    return Muestra(hr=hr, spo2=spo2)
