"""
Microcontrolador del sistema

Este modulo representa la logica del firmware que corre en el STM32 simulado.

El microcontrolador es responsable de:
- Calcular el CCR del timer PWM a partir del ritmo cardiaco
- Calcular la mascara ODR del puerto de alarmas a partir del SpO2
- Llevar el reloj del sistema y el contador de paquetes

No existe comunicacion real con hardware: los "registros" son solo valores.
"""

from patient_monitor.config.settings import SETTINGS
from patient_monitor.model.alarmas import evaluar_alarma
from patient_monitor.model.ecuaciones import calcular_ccr
from patient_monitor.model.muestra import Muestra, MuestraProcesada


class RelojSistema:
    """
    Reloj simulado: avanza un paso fijo por cada muestra procesada.

    No depende del reloj real del PC.
    """

    def __init__(self, paso_s: float = SETTINGS.paso_tiempo_s):
        self.paso_s = float(paso_s)
        self.t_s = 0.0

    def avanzar(self) -> None:
        self.t_s += self.paso_s


class Microcontrolador:
    """
    Unidad que procesa cada muestra y mantiene el estado entre muestras
    (solo reloj y contador; las muestras no se guardan).
    """

    def __init__(self, paso_s: float = SETTINGS.paso_tiempo_s):
        self.reloj = RelojSistema(paso_s)
        self.contador_paquetes = 0

    def procesar(self, muestra: Muestra) -> MuestraProcesada:
        """
        Procesa una muestra cruda.

        El tiempo asociado es el del reloj ANTES de avanzar, de modo que la
        primera muestra queda en t = 0.000 s. El llamador debe invocar
        finalizar_ciclo() despues de usar el resultado.
        """
        ccr = calcular_ccr(muestra.hr)
        alarma = evaluar_alarma(muestra.spo2)

        self.contador_paquetes += 1

        return MuestraProcesada(
            muestra=muestra,
            ccr=ccr,
            alarma=alarma,
            t_s=self.reloj.t_s,
            contador=self.contador_paquetes,
        )

    def finalizar_ciclo(self) -> None:
        """Avanza el reloj del sistema (1 ms por muestra)."""
        self.reloj.avanzar()
