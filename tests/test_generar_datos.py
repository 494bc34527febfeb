# tests/test_generar_datos.py
import re
from pathlib import Path

from patient_monitor.controller.controller import ejecutar_simulacion
from patient_monitor.controller.fuentes import FuenteCSV, FuenteSimulada
from tools.generar_datos import construir_dataframe, generar_csv, main


def test_dataframe_shape():
    df = construir_dataframe(FuenteSimulada(semilla=5), 30)
    assert list(df.columns) == ["hr", "spo2"]
    assert len(df) == 30


def test_generated_file_has_no_header_and_reads_back(tmp_path: Path):
    ruta = generar_csv(tmp_path / "patient_data.csv", 200, FuenteSimulada(semilla=11))

    lineas = ruta.read_text(encoding="utf-8").splitlines()
    assert len(lineas) == 200
    assert all(re.fullmatch(r"-?\d+,\d+", ln) for ln in lineas)

    with FuenteCSV(str(ruta)) as fuente:
        assert len(list(fuente)) == 200


def test_zero_samples_gives_empty_stream(tmp_path: Path):
    ruta = generar_csv(tmp_path / "vacio.csv", 0, FuenteSimulada(semilla=1))
    with FuenteCSV(str(ruta)) as fuente:
        assert list(fuente) == []


def test_cli_output_feeds_the_simulation(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(["--muestras", "1500", "--semilla", "3", "--prob-desconexion", "0"])
    assert "[OK] CSV generado" in capsys.readouterr().out

    assert ejecutar_simulacion() == 0
    assert "Simulation Completed Successfully." in capsys.readouterr().out
