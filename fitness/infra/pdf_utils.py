import io
from typing import Optional

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from fitness.domain.Plan import Plan
from fitness.domain.Profile import Profile
from fitness.logic.reporting.calories import compute_plan_calories


def generate_pdf_for_plan(plan: Plan, profile: Profile, title: Optional[str] = None) -> bytes:
    """Generate a PDF table: Category / Activity / Minutes / Intensity / kcal, with a total row."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    report = compute_plan_calories(plan, profile)
    styles = getSampleStyleSheet()
    elements = [
        Paragraph(title or f"Workout Plan – {profile.name} ({profile.goal})", styles["Title"]),
        Paragraph(f"Body weight: {profile.weight_kg} kg", styles["Normal"]),
        Spacer(1, 16),
    ]

    data = [["Category", "Activity", "Minutes", "Intensity", "kcal"]]
    for row in report["activities"]:
        data.append([
            row["category"],
            row["label"],
            str(row["duration_minutes"]),
            str(row["intensity"]),
            f"{row['calories']:.2f}",
        ])
    data.append(["Total", "", str(report["total_minutes"]), "", f"{report['total_calories']:.2f}"])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTNAME", (0,-1), (-1,-1), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
