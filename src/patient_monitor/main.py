"""
Entry point para ejecutar la simulacion del monitor de paciente.

Forma recomendada de ejecucion (desde la carpeta donde esta patient_data.csv):
    patient-monitor

Alternativas equivalentes (desde la raiz del repo):
    python -m patient_monitor.main
    python src/patient_monitor/main.py

Nota:
- Este archivo vive dentro del paquete patient_monitor.
- Para que los imports funcionen incluso cuando se ejecuta como script,
  se agrega la carpeta "src" al sys.path.
- El archivo de entrada es fijo (SETTINGS.ruta_csv); no hay flags.
"""

import os
import sys


def _asegurar_src_en_syspath() -> None:
    """
    Agrega la carpeta /src al sys.path para que los imports del paquete funcionen
    al ejecutar con python src/patient_monitor/main.py.

    Estructura esperada:
      repo/
        src/
          patient_monitor/
            main.py
            controller/
              controller.py
    """
    base_dir = os.path.dirname(os.path.abspath(__file__))   # .../src/patient_monitor
    src_dir = os.path.dirname(base_dir)                     # .../src

    if src_dir not in sys.path:
        sys.path.insert(0, src_dir)


def main() -> int:
    _asegurar_src_en_syspath()

    # Import despues de setear sys.path (import seguro)
    from patient_monitor.controller.controller import ejecutar_simulacion

    return ejecutar_simulacion()


if __name__ == "__main__":
    sys.exit(main())
