"""
Compilación del reporte LaTeX a PDF.

Usa el primer motor disponible entre pdflatex, xelatex y lualatex.
"""

import shutil
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class LaTeXEngine(str, Enum):
    """Motores de compilación LaTeX disponibles."""
    PDFLATEX = "pdflatex"
    XELATEX = "xelatex"
    LUALATEX = "lualatex"


# Extensiones auxiliares que se eliminan tras compilar
AUX_EXTENSIONS = (".aux", ".log", ".out", ".fls", ".fdb_latexmk", ".synctex.gz")

COMPILE_TIMEOUT_S = 120


@dataclass
class CompilationResult:
    """Resultado de la compilación LaTeX."""
    success: bool
    pdf_path: Optional[Path] = None
    log_path: Optional[Path] = None
    error_message: Optional[str] = None
    warnings: list[str] = field(default_factory=list)


def find_latex_engine(preferred: LaTeXEngine = LaTeXEngine.PDFLATEX) -> Optional[str]:
    """
    Busca un motor LaTeX disponible en el sistema.

    Args:
        preferred: Motor preferido a usar

    Returns:
        Nombre del ejecutable encontrado, o None si no hay ninguno
    """
    candidates = [preferred] + [e for e in LaTeXEngine if e != preferred]
    for engine in candidates:
        if shutil.which(engine.value):
            return engine.value
    return None


def compile_latex(
    tex_file: Path,
    engine: LaTeXEngine = LaTeXEngine.PDFLATEX,
    runs: int = 2,
    clean_aux: bool = True,
) -> CompilationResult:
    """
    Compila un archivo LaTeX a PDF en su mismo directorio.

    Args:
        tex_file: Ruta al archivo .tex
        engine: Motor LaTeX preferido
        runs: Número de pasadas
        clean_aux: Limpiar archivos auxiliares después de compilar

    Returns:
        CompilationResult con el resultado de la compilación
    """
    tex_file = Path(tex_file).resolve()

    if not tex_file.exists():
        return CompilationResult(success=False, error_message=f"Archivo no encontrado: {tex_file}")
    if tex_file.suffix != ".tex":
        return CompilationResult(
            success=False,
            error_message=f"El archivo debe tener extensión .tex: {tex_file}",
        )

    latex_cmd = find_latex_engine(engine)
    if latex_cmd is None:
        return CompilationResult(
            success=False,
            error_message=(
                "No se encontró ningún motor LaTeX instalado. "
                "Instale TeX Live, MiKTeX o MacTeX."
            ),
        )

    work_dir = tex_file.parent
    cmd = [latex_cmd, "-interaction=nonstopmode", "-file-line-error", tex_file.name]

    last_stderr = ""
    for _ in range(runs):
        try:
            proc = subprocess.run(
                cmd,
                cwd=work_dir,
                capture_output=True,
                text=True,
                timeout=COMPILE_TIMEOUT_S,
            )
        except subprocess.TimeoutExpired:
            return CompilationResult(
                success=False,
                error_message=f"Tiempo de compilación excedido (>{COMPILE_TIMEOUT_S}s)",
            )
        except FileNotFoundError:
            return CompilationResult(success=False, error_message=f"No se pudo ejecutar {latex_cmd}")
        last_stderr = proc.stderr or ""

    pdf_path = work_dir / f"{tex_file.stem}.pdf"
    log_path = work_dir / f"{tex_file.stem}.log"
    log_text = log_path.read_text(encoding="utf-8", errors="ignore") if log_path.exists() else ""
    warnings = [line.strip() for line in log_text.splitlines() if "Warning" in line]

    if not pdf_path.exists():
        return CompilationResult(
            success=False,
            log_path=log_path if log_path.exists() else None,
            error_message=_extract_error(log_text) or last_stderr[:500] or "Error desconocido",
            warnings=warnings[:5],
        )

    if clean_aux:
        _clean_aux_files(work_dir, tex_file.stem)
        log_path = None

    return CompilationResult(
        success=True,
        pdf_path=pdf_path,
        log_path=log_path,
        warnings=warnings[:10],
    )


def _extract_error(log_text: str) -> Optional[str]:
    """Extrae el primer error ('! ...') del contenido del log."""
    lines = log_text.splitlines()
    for i, line in enumerate(lines):
        if line.startswith("!"):
            error_lines = [line]
            for following in lines[i + 1:i + 5]:
                if following.strip():
                    error_lines.append(following)
                if following.startswith("l."):
                    break
            return "\n".join(error_lines)
    return None


def _clean_aux_files(directory: Path, basename: str) -> None:
    """Elimina archivos auxiliares de LaTeX."""
    for ext in AUX_EXTENSIONS:
        (directory / f"{basename}{ext}").unlink(missing_ok=True)
