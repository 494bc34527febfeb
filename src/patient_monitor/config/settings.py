"""
Configuracion central del proyecto Patient Monitor.

Idea:
- Aqui van los parametros fijos del "firmware" simulado (timer, umbrales, reloj).
- El Model usa estos valores para calcular CCR y mascaras de alarma.
- El Controller usa la ruta del archivo y el intervalo de display.

No existe configuracion en tiempo de ejecucion: sin flags, sin variables de
entorno, sin archivo de configuracion. Los valores estan "compilados" aqui.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    # -------------------------------
    # Entrada de datos
    # -------------------------------
    ruta_csv: str = "patient_data.csv"   # relativa al directorio de trabajo

    # -------------------------------
    # Timer PWM (LED de estado)
    # -------------------------------
    timer_reload_val: int = 1000     # Auto-Reload Register (ARR)
    max_hr_limit: float = 200.0      # BPM que corresponde a duty 100 %

    # -------------------------------
    # Reloj simulado
    # -------------------------------
    paso_tiempo_s: float = 0.001     # 1 ms por muestra -> 1 kHz
    intervalo_display: int = 1000    # se imprime cada N muestras (1 s)

    # -------------------------------
    # Umbrales de SpO2 (%)
    # -------------------------------
    spo2_critico: int = 90           # SpO2 < 90 -> CRITICAL
    spo2_warning: int = 95           # 90 <= SpO2 < 95 -> WARNING


# Instancia global utilizada por el resto del proyecto
SETTINGS = Settings()
