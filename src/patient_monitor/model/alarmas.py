"""
Estados de alarma (mascaras GPIO del puerto D)

Cada estado corresponde a un patron de LEDs escrito en el registro ODR:

- NORMAL    0x0000  SpO2 >= 95 %      (todos apagados)
- WARNING   0x5555  90 % <= SpO2 < 95 (pines pares)
- CRITICAL  0xAAAA  SpO2 < 90 %       (pines impares)
- FAILURE   0xFFFF  SpO2 == 0         (sensor desconectado, todos encendidos)
"""

from patient_monitor.config.settings import SETTINGS
from patient_monitor.model.muestra import ResultadoAlarma


ESTADO_NORMAL = ResultadoAlarma(0x0000, "NORMAL")
ESTADO_WARNING = ResultadoAlarma(0x5555, "WARNING: Even Pins ON")
ESTADO_CRITICAL = ResultadoAlarma(0xAAAA, "CRITICAL: Odd Pins ON")
ESTADO_FAILURE = ResultadoAlarma(0xFFFF, "SENSOR ERROR")


def evaluar_alarma(
    spo2: int,
    umbral_critico: int = SETTINGS.spo2_critico,
    umbral_warning: int = SETTINGS.spo2_warning,
) -> ResultadoAlarma:
    """
    Retorna la mascara GPIO correspondiente al nivel de SpO2.

    El orden de evaluacion importa: 0 se interpreta como error de sensor
    antes de compararse con los umbrales.
    """
    if spo2 == 0:
        return ESTADO_FAILURE
    if spo2 < umbral_critico:
        return ESTADO_CRITICAL
    if spo2 < umbral_warning:
        return ESTADO_WARNING
    return ESTADO_NORMAL
