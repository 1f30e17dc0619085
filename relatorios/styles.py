# relatorios/styles.py
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle


def pdf_palette():
    return {
        "PRIMARY": colors.HexColor("#073763"),
        "BORDER": colors.HexColor("#D7DCE3"),
        "SOFT": colors.HexColor("#EDF2F7"),
        "MUTED": colors.HexColor("#6B7280"),

        # destaque de economia
        "OK": colors.HexColor("#38761D"),
        "OK_SOFT": colors.HexColor("#F0FDF4"),
        "HIGHLIGHT": colors.HexColor("#92E625"),
        "WHATSAPP": colors.HexColor("#25D366"),
    }


# Estilos que as páginas usam pelo nome
_REQUIRED = ("H1Capa", "Hero", "Centro", "Nota")


def pdf_styles():
    styles = getSampleStyleSheet()
    pal = pdf_palette()

    body = styles["BodyText"]
    body.fontName = "Helvetica"
    body.fontSize = 10
    body.leading = 13

    def _add(name, **kw):
        if name not in styles.byName:
            styles.add(ParagraphStyle(name=name, **kw))

    _add(
        "H1Capa",
        parent=styles["Title"],
        fontName="Helvetica-Bold",
        fontSize=28,
        leading=34,
        textColor=pal["PRIMARY"],
        alignment=TA_CENTER,
    )
    _add(
        "Hero",
        parent=body,
        fontName="Helvetica-Bold",
        fontSize=18,
        leading=22,
        textColor=colors.white,
        alignment=TA_CENTER,
    )
    _add("Centro", parent=body, alignment=TA_CENTER)
    _add("Nota", parent=body, fontSize=8, leading=10, textColor=pal["MUTED"], alignment=TA_CENTER)

    _assert_required(styles)
    return styles


def _assert_required(styles):
    missing = [k for k in _REQUIRED if k not in styles.byName]
    if missing:
        raise KeyError(f"Estilos PDF ausentes: {missing}. Defina-os em relatorios/styles.py")
