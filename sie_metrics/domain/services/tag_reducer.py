"""
Servicio de dominio: Reductor de tags SIE.

Recorre las directivas en orden y las acumula en un AcumuladorSie:
metadatos de la empresa, límites del ejercicio, registro de cuentas,
saldos iniciales, cambios del periodo y verificaciones.

Tags reconocidos:
    #FNAMN  "<nombre>"                      → nombre de la empresa
    #RAR    0 <inicio> <fin>                → ejercicio actual (otros offsets se ignoran)
    #KONTO  <num> "<nombre>"                → alta/sobrescritura en el registro
    #IB     0 <cuenta> <monto>              → suma al saldo inicial (explícito)
    #UB     -1 <cuenta> <monto>             → suma al MISMO saldo inicial
    #VER    <serie> <num> <fecha> "<texto>" → abre una verificación nueva
    #TRANS  <cuenta> {<dims>} <monto>       → línea de la verificación abierta

Cualquier otro tag se ignora.

Un monto inválido en #TRANS detiene el recorrido y se devuelve un
ErrorRecuperable. Cualquier otra excepción (un #VER sin campos
suficientes, un monto inválido en #IB/#UB) se propaga: la convierte
en ErrorFatal el límite exterior en sie_parser.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from sie_metrics.domain.exceptions import AmountFormatError
from sie_metrics.domain.models.cuenta import Cuenta
from sie_metrics.domain.models.resultado_parseo import ErrorFatal, ErrorRecuperable
from sie_metrics.domain.models.verificacion import Transaccion, Verificacion
from sie_metrics.domain.services.line_classifier import LineaDirectiva
from sie_metrics.domain.shared.money import parse_amount
from sie_metrics.domain.shared.sie_date import parse_sie_date

MARCADOR_AMBIGUEDAD = "#UB -1"
"""Texto que identifica la advertencia de saldos iniciales derivados."""

ADVERTENCIA_SALDOS_DERIVADOS = (
    "No se encontró '#IB 0' (saldo inicial). Los saldos iniciales se basan en "
    f"'{MARCADOR_AMBIGUEDAD}' (saldo final del ejercicio anterior)."
)

NOMBRE_EMPRESA_POR_DEFECTO = "Okänt företag"

_KONTO = re.compile(r'(\d+)\s+"?([^"]+)"?')
_VER = re.compile(r'(\S+)\s+(\S+)\s+(\S+)(?:\s+"?([^"]*)"?)?')
_TRANS = re.compile(r"(\d+)\s+\{.*?\}\s+(\S+)")


@dataclass
class VerificacionEnCurso:
    """Verificación mientras todavía recibe transacciones."""

    id: str
    fecha: str
    descripcion: str
    transacciones: list[Transaccion] = field(default_factory=list)

    def congelar(self) -> Verificacion:
        """Devuelve la versión inmutable de esta verificación."""
        return Verificacion(
            id=self.id,
            fecha=self.fecha,
            descripcion=self.descripcion,
            transacciones=tuple(self.transacciones),
        )


@dataclass
class AcumuladorSie:
    """Estado acumulado durante UN parseo. Nunca se reutiliza."""

    nombre_empresa: str = NOMBRE_EMPRESA_POR_DEFECTO
    inicio_ejercicio: str = ""
    fin_ejercicio: str = ""
    cuentas: dict[str, Cuenta] = field(default_factory=dict)
    saldos_iniciales: dict[str, Decimal] = field(default_factory=dict)
    cambios_periodo: dict[str, Decimal] = field(default_factory=dict)
    verificaciones: list[VerificacionEnCurso] = field(default_factory=list)
    verificacion_actual: int | None = None
    """Índice en `verificaciones` de la verificación abierta, o None."""
    tiene_saldo_inicial_explicito: bool = False
    advertencias: list[str] = field(default_factory=list)

    def sumar_saldo_inicial(self, cuenta: str, monto: Decimal) -> None:
        self.saldos_iniciales[cuenta] = self.saldos_iniciales.get(cuenta, Decimal("0")) + monto

    def sumar_cambio_periodo(self, cuenta: str, monto: Decimal) -> None:
        self.cambios_periodo[cuenta] = self.cambios_periodo.get(cuenta, Decimal("0")) + monto

    def abrir_verificacion(self, verificacion: VerificacionEnCurso) -> None:
        self.verificaciones.append(verificacion)
        self.verificacion_actual = len(self.verificaciones) - 1

    @property
    def verificacion_abierta(self) -> VerificacionEnCurso | None:
        if self.verificacion_actual is None:
            return None
        return self.verificaciones[self.verificacion_actual]

    @property
    def cuentas_conocidas(self) -> set[str]:
        """Unión de registro, saldos iniciales y cambios del periodo."""
        return set(self.cuentas) | set(self.saldos_iniciales) | set(self.cambios_periodo)


class TagReducer:
    """Pliega el flujo de directivas en un AcumuladorSie."""

    def __init__(self) -> None:
        self._handlers = {
            "FNAMN": self._aplicar_fnamn,
            "RAR": self._aplicar_rar,
            "KONTO": self._aplicar_konto,
            "IB": self._aplicar_ib,
            "UB": self._aplicar_ub,
            "VER": self._aplicar_ver,
            "TRANS": self._aplicar_trans,
        }

    def reduce(
        self, directivas: Iterable[LineaDirectiva], contenido: str
    ) -> AcumuladorSie | ErrorRecuperable | ErrorFatal:
        """Recorre las directivas y devuelve el acumulador final.

        Args:
            directivas: Directivas en orden de aparición.
            contenido: Documento original completo, para el ErrorRecuperable.

        Returns:
            AcumuladorSie si el recorrido terminó.
            ErrorRecuperable si un monto de #TRANS no se pudo interpretar.
            ErrorFatal si el documento no tiene ninguna cuenta.
        """
        acumulador = AcumuladorSie()

        for directiva in directivas:
            handler = self._handlers.get(directiva.tag)
            if handler is None:
                continue
            fallo = handler(acumulador, directiva, contenido)
            if fallo is not None:
                return fallo

        if not acumulador.tiene_saldo_inicial_explicito and acumulador.saldos_iniciales:
            acumulador.advertencias.append(ADVERTENCIA_SALDOS_DERIVADOS)

        if not acumulador.cuentas:
            return ErrorFatal("No se encontraron cuentas. ¿Es un archivo SIE válido?")

        return acumulador

    # =================================================================
    # HANDLERS: uno por tag reconocido
    # =================================================================

    def _aplicar_fnamn(self, acumulador: AcumuladorSie, directiva: LineaDirectiva, contenido: str):
        acumulador.nombre_empresa = directiva.valor

    def _aplicar_rar(self, acumulador: AcumuladorSie, directiva: LineaDirectiva, contenido: str):
        partes = directiva.valor.split()
        if len(partes) >= 3 and partes[0] == "0":
            acumulador.inicio_ejercicio = partes[1]
            acumulador.fin_ejercicio = partes[2]

    def _aplicar_konto(self, acumulador: AcumuladorSie, directiva: LineaDirectiva, contenido: str):
        match = _KONTO.match(directiva.valor)
        if match:
            numero, nombre = match.groups()
            acumulador.cuentas[numero] = Cuenta(numero=numero, nombre=nombre.strip())

    def _aplicar_ib(self, acumulador: AcumuladorSie, directiva: LineaDirectiva, contenido: str):
        partes = directiva.valor.split()
        if len(partes) >= 3 and partes[0] == "0":
            acumulador.tiene_saldo_inicial_explicito = True
            acumulador.sumar_saldo_inicial(partes[1], parse_amount(partes[2]))

    def _aplicar_ub(self, acumulador: AcumuladorSie, directiva: LineaDirectiva, contenido: str):
        partes = directiva.valor.split()
        if len(partes) >= 3 and partes[0] == "-1":
            acumulador.sumar_saldo_inicial(partes[1], parse_amount(partes[2]))

    def _aplicar_ver(self, acumulador: AcumuladorSie, directiva: LineaDirectiva, contenido: str):
        match = _VER.match(directiva.valor)
        if not match:
            raise ValueError(f"Encabezado de verificación mal formado: '{directiva.linea}'")

        serie, numero, fecha, descripcion = match.groups()
        try:
            parse_sie_date(fecha)
        except ValueError as e:
            raise ValueError(
                f"Fecha inválida '{fecha}' en encabezado de verificación: '{directiva.linea}' ({e})"
            ) from e

        acumulador.abrir_verificacion(
            VerificacionEnCurso(
                id=f"{serie}-{numero}",
                fecha=fecha,
                descripcion=(descripcion or "").strip(),
            )
        )

    def _aplicar_trans(
        self, acumulador: AcumuladorSie, directiva: LineaDirectiva, contenido: str
    ) -> ErrorRecuperable | None:
        verificacion = acumulador.verificacion_abierta
        if verificacion is None:
            return None

        match = _TRANS.match(directiva.valor)
        if not match:
            return None

        numero_cuenta, token_monto = match.groups()
        try:
            monto = parse_amount(token_monto)
        except AmountFormatError as e:
            return ErrorRecuperable(
                linea_problematica=directiva.linea,
                contenido_original=contenido,
                mensaje_error=f"Error en línea de transacción: {e}",
            )

        verificacion.transacciones.append(Transaccion(numero_cuenta=numero_cuenta, monto=monto))
        acumulador.sumar_cambio_periodo(numero_cuenta, monto)
        return None
