"""
Ecuaciones del sistema (Patient Monitor)

Este modulo contiene las funciones matematicas del timer PWM:

- Saturacion del ritmo cardiaco al rango de referencia
- Mapeo lineal HR -> valor del registro CCR
- Conversion CCR -> porcentaje de duty cycle

Nota:
- No se modela el periferico real, solo el valor que se escribiria en el registro.
"""

from patient_monitor.config.settings import SETTINGS


# -------------------------------------------------------
# Utilidades basicas
# -------------------------------------------------------

def saturar(valor: int, minimo: int, maximo: int) -> int:
    """Limita valor al rango [minimo, maximo]."""
    if valor > maximo:
        return maximo
    if valor < minimo:
        return minimo
    return valor


# -------------------------------------------------------
# Timer PWM
# -------------------------------------------------------

def calcular_ccr(
    hr: int,
    max_hr: float = SETTINGS.max_hr_limit,
    reload_val: int = SETTINGS.timer_reload_val,
) -> int:
    """
    Mapea el ritmo cardiaco al valor del Capture/Compare Register.

    Escala: 0..max_hr BPM -> 0..reload_val

    El HR se satura antes de escalar, por lo que el resultado siempre
    esta en [0, reload_val]. La division se hace en punto flotante y
    se trunca hacia cero.
    """
    hr = saturar(int(hr), 0, int(max_hr))
    return int(hr / max_hr * reload_val)


def porcentaje_duty(ccr: int, reload_val: int = SETTINGS.timer_reload_val) -> float:
    """Duty cycle (%) del CCR respecto al ARR."""
    return ccr / (reload_val / 100.0)
