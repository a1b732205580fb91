"""
Generate 5 Sample FNOL (First Notice of Loss) Documents
Format: one "- Label: value" line per field, written as TXT and PDF
Currency: $ (US Dollars)

Run this script to create the sample documents:
    python generate_samples.py
"""

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas
from reportlab.lib.colors import HexColor
import os

from config import Config
from fnol.parser import FIELD_LABELS


def render_fnol_text(data):
    """Render a sample as FNOL text. Fields absent from data are left out."""
    lines = ["FIRST NOTICE OF LOSS", ""]
    for name, label in FIELD_LABELS.items():
        value = data.get(name)
        if value is None:
            continue
        lines.append(f"- {label}: {value}")
    return "\n".join(lines) + "\n"


def draw_fnol_form(c, text, page_width, page_height):
    """Draw the FNOL text on a single page, one field per line."""
    header_bg = HexColor('#1a237e')
    text_color = HexColor('#212121')
    label_color = HexColor('#546e7a')

    margin = 40
    y = page_height - 40
    content_width = page_width - 2 * margin

    # ===== FORM HEADER =====
    c.setFillColor(header_bg)
    c.rect(margin, y - 36, content_width, 36, fill=1, stroke=0)
    c.setFillColor(HexColor('#ffffff'))
    c.setFont("Helvetica-Bold", 14)
    c.drawString(margin + 12, y - 24, "FIRST NOTICE OF LOSS")
    y -= 60

    # ===== FIELDS =====
    c.setFillColor(text_color)
    c.setFont("Helvetica", 9)
    for line in text.splitlines()[2:]:
        # The parser reads one line per field, so a value can be neither cut nor wrapped
        if c.stringWidth(line, "Helvetica", 9) > content_width:
            raise ValueError(f"Field line too long for the page: {line[:40]}...")
        c.drawString(margin + 8, y, line)
        y -= 16

    # Footer
    c.setFillColor(label_color)
    c.setFont("Helvetica", 7)
    c.drawString(margin, 30, "FNOL (Sample)")
    c.drawRightString(page_width - margin, 30, "Page 1 of 1")


# ===== 5 SAMPLE SCENARIOS =====

samples = [
    {
        'filename': 'claim_001_fast_track',
        'policy_number': 'POL-AUTO-2024-08742',
        'policyholder_name': 'Daniel Reyes',
        'effective_dates': '01/04/2025 to 31/03/2026',
        'incident_date': '01/02/2026',
        'incident_time': '10:30 AM',
        'location': '4th Street and Market Ave, San Jose, CA 95113',
        'description': 'Minor rear-end collision at a traffic signal. Dent on rear bumper and cracked tail light. No injuries.',
        'claimant': 'Daniel Reyes',
        'third_parties': 'Laura Chen',
        'contact_details': '+1-408-555-0142, daniel.reyes@email.com',
        'asset_type': 'Private Car',
        'asset_id': '1HGCM82633A004352',
        'estimated_damage': '$8,500',
        'claim_type': 'Auto - Property Damage',
        'attachments': 'photos.zip, police_report.pdf',
    },
    {
        'filename': 'claim_002_manual_review',
        'policy_number': 'POL-AUTO-2023-33210',
        'policyholder_name': 'Megan Walsh',
        'effective_dates': '15/06/2025 to 14/06/2026',
        'incident_date': '30/01/2026',
        'incident_time': '3:45 PM',
        'location': 'I-80 near exit 12, Reno, NV',
        'description': 'Vehicle skidded on a wet road and hit the highway divider. Airbags deployed.',
        'claimant': 'Megan Walsh',
        'contact_details': '+1-775-555-0199',
        'asset_type': 'Sedan',
        'estimated_damage': 'pending assessment',  # no number -> missing estimate
        'claim_type': 'Auto - Property Damage',
        # attachments missing
    },
    {
        'filename': 'claim_003_investigation',
        'policy_number': 'POL-AUTO-2024-77654',
        'policyholder_name': 'Victor Hale',
        'effective_dates': '01/01/2025 to 31/12/2025',
        'incident_date': '28/01/2026',
        'incident_time': '11:50 PM',
        'location': 'Service road off Route 9, Albany, NY',
        'description': 'Vehicle found burned on an isolated road. Witness statements are inconsistent and the scene looks staged.',
        'claimant': 'Victor Hale',
        'third_parties': 'None',
        'contact_details': '+1-518-555-0110, vhale@example.com',
        'asset_type': 'SUV',
        'asset_id': 'WBA5R1C50KAE12345',
        'estimated_damage': '$62,000',
        'claim_type': 'Auto - Total Loss / Fire',
        'attachments': 'fire_report.pdf, photos.zip',
    },
    {
        'filename': 'claim_004_specialist_injury',
        'policy_number': 'POL-AUTO-2025-12890',
        'policyholder_name': 'Angela Brooks',
        'effective_dates': '01/09/2025 to 31/08/2026',
        'incident_date': '29/01/2026',
        'incident_time': '8:15 AM',
        'location': 'Lakeshore Dr and Oak St, Chicago, IL 60611',
        'description': 'Head-on collision with a delivery truck. Driver taken to hospital with fractured ribs.',
        'claimant': 'Angela Brooks',
        'third_parties': 'Metro Deliveries LLC',
        'contact_details': '+1-312-555-0177, a.brooks@example.com',
        'asset_type': 'Minivan',
        'asset_id': '5FNRL6H78NB012345',
        'estimated_damage': '$14,200',
        'claim_type': 'Bodily Injury',
        'attachments': 'hospital_admission.pdf, photos.zip, police_report.pdf',
    },
    {
        'filename': 'claim_005_standard',
        'policy_number': 'POL-AUTO-2024-45678',
        'policyholder_name': 'Samuel Ortiz',
        'effective_dates': '01/09/2024 to 31/08/2025',
        'incident_date': '27/01/2026',
        'incident_time': '6:30 PM',
        'location': 'Highway 101 at Marsh Rd, Menlo Park, CA',
        'description': 'Three-vehicle pile-up during evening traffic. Front and rear damage to the insured vehicle.',
        'claimant': 'Samuel Ortiz',
        'third_parties': 'Amit Joshi, Kavya Rao',
        'contact_details': '+1-650-555-0123, samuel.ortiz@email.com',
        'asset_type': 'SUV',
        'asset_id': 'MAL1C2BL5P1234567',
        'estimated_damage': '$28,500',
        'claim_type': 'Auto - Property Damage',
        'attachments': 'photos.zip, witness_statement.txt',
    },
]


def main(output_dir=None):
    output_dir = output_dir or Config.SAMPLE_FOLDER
    os.makedirs(output_dir, exist_ok=True)

    for sample in samples:
        text = render_fnol_text(sample)

        txt_path = os.path.join(output_dir, sample['filename'] + '.txt')
        with open(txt_path, 'w', encoding='utf-8') as f:
            f.write(text)

        pdf_path = os.path.join(output_dir, sample['filename'] + '.pdf')
        width, height = letter
        c = canvas.Canvas(pdf_path, pagesize=letter)
        draw_fnol_form(c, text, width, height)
        c.save()
        print(f"  Created: {sample['filename']} (.txt, .pdf)")

    print(f"\nAll {len(samples)} sample FNOL documents generated in: {output_dir}")
    print("\nScenarios:")
    print("  1. claim_001_fast_track          -> $8,500 damage, all mandatory fields present")
    print("  2. claim_002_manual_review       -> Missing: Attachments, Initial Estimate")
    print("  3. claim_003_investigation       -> Contains: 'staged', 'inconsistent' keywords")
    print("  4. claim_004_specialist_injury   -> Claim type: Bodily Injury")
    print("  5. claim_005_standard            -> $28,500 damage (above $25,000 threshold)")


if __name__ == '__main__':
    main()
