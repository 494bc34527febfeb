"""
Vista de consola para Patient Monitor (MVC)

Esta vista NO implementa el modelo ni la logica del sistema.
Solo da formato e imprime:
- el banner de inicio
- el bloque de estado de cada muestra que pasa el filtro
- el aviso de fin de simulacion
- el diagnostico cuando no se puede abrir el archivo

Todos los numeros se formatean con '.' como separador decimal
(el format de Python no depende del locale).
"""

from patient_monitor.model.ecuaciones import porcentaje_duty
from patient_monitor.model.muestra import MuestraProcesada


SEPARADOR = "-" * 62


def formatear_bloque(procesada: MuestraProcesada) -> str:
    """Bloque de 4 lineas: estado, PWM, GPIO y separador."""
    m = procesada.muestra
    duty = porcentaje_duty(procesada.ccr)
    alarma = procesada.alarma

    return "\n".join(
        [
            f"Time: {procesada.t_s:.3f} s | BPM: {m.hr} | SpO2: {m.spo2}",
            f"  -> [PWM] Calculated CCR Value: {procesada.ccr} (Duty: {duty:.1f}%)",
            f"  -> [GPIO] Port D ODR Value: 0x{alarma.mascara:04X} ({alarma.descripcion})",
            SEPARADOR,
        ]
    )


def mostrar_inicio() -> None:
    print("--- BME3323 FIRMWARE SIMULATION: STARTING ---")
    print("--- Processing Patient Vitals... ---\n")


def mostrar_muestra(procesada: MuestraProcesada) -> None:
    print(formatear_bloque(procesada))


def mostrar_fin() -> None:
    print("\n>>> Simulation Completed Successfully.")


def mostrar_error_fuente(ruta_csv: str) -> None:
    print(f"[SYSTEM ERROR] Input file '{ruta_csv}' is missing.")
    print("Please verify the file location.")
