"""
Controller del sistema

Este modulo corresponde a la capa Controller del patron MVC.

El Controller es responsable de:
- Abrir la fuente de datos (archivo del paciente)
- Pasar cada muestra al microcontrolador simulado
- Decidir que muestras se muestran (filtro de display)
- Entregar el resultado a la vista y retornar el codigo de salida

Codigos de salida:
- EXIT_OK (0): la fuente se agoto (puede haber 0 muestras)
- EXIT_FUENTE_NO_DISPONIBLE (1): no se pudo abrir el archivo
"""

from typing import Optional

from patient_monitor.config.settings import SETTINGS
from patient_monitor.controller.fuentes import FuenteCSV, FuenteDatos
from patient_monitor.model.microcontrolador import Microcontrolador
from patient_monitor.model.muestra import MuestraProcesada
from patient_monitor.view import vista_consola


EXIT_OK = 0
EXIT_FUENTE_NO_DISPONIBLE = 1


def debe_mostrarse(procesada: MuestraProcesada, intervalo: int = SETTINGS.intervalo_display) -> bool:
    """
    Filtro de display, para no inundar la terminal. Se imprime:
    a) la primera muestra
    b) cada muestra multiplo de `intervalo` (cada 1.0 s simulado)
    c) toda muestra con alarma activa
    """
    es_inicio = procesada.contador == 1
    es_marca = procesada.contador % intervalo == 0
    return es_inicio or es_marca or procesada.alarma.activa


class MonitorController:
    """
    Orquesta una simulacion completa sobre una fuente de datos.

    Cada llamada a ejecutar() crea un microcontrolador nuevo, por lo que el
    reloj y el contador parten de cero en cada ejecucion.
    """

    def __init__(self, ruta_csv: Optional[str] = None):
        self.ruta_csv = ruta_csv or SETTINGS.ruta_csv
        self.mcu = Microcontrolador()

    def procesar_fuente(self, fuente: FuenteDatos) -> int:
        """Recorre la fuente hasta agotarla. Retorna la cantidad de muestras procesadas."""
        for muestra in fuente:
            procesada = self.mcu.procesar(muestra)

            if debe_mostrarse(procesada):
                vista_consola.mostrar_muestra(procesada)

            self.mcu.finalizar_ciclo()

        return self.mcu.contador_paquetes

    def ejecutar(self) -> int:
        """
        Ejecuta la simulacion sobre el archivo configurado.

        Si el archivo no se puede abrir, se muestra el diagnostico y no se
        entra al loop. El reloj y el contador parten de cero en cada llamada.
        """
        self.mcu = Microcontrolador()

        try:
            fuente = FuenteCSV(self.ruta_csv)
        except OSError:
            vista_consola.mostrar_error_fuente(self.ruta_csv)
            return EXIT_FUENTE_NO_DISPONIBLE

        with fuente:
            vista_consola.mostrar_inicio()
            self.procesar_fuente(fuente)

        vista_consola.mostrar_fin()
        return EXIT_OK


def ejecutar_simulacion(ruta_csv: Optional[str] = None) -> int:
    """Atajo: crea un MonitorController y ejecuta la simulacion."""
    return MonitorController(ruta_csv).ejecutar()
