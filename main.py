import sys
import logging
import datetime
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from core.converters import parse_air_spacing, parse_count, parse_size_label, parse_temperature
from core.errors import AmpacityError
from core.models import AirSpacing, ConductorType, InstallationMethod, QueryParameters
from standards.ampacity_logic import AmpacityLogic

def get_query_params() -> QueryParameters:
    print("\n--- Cable ---")
    print("Cable types: (1) Hypalon 90°C, (2) PVC Flexible 105°C")
    t_choice = input("Select type [1]: ").strip()
    c_type = ConductorType.PVC if t_choice == "2" else ConductorType.HYPALON

    sizes = AmpacityLogic.size_labels(c_type)
    print(f"Sizes (mm²): {', '.join(sizes)}")
    default_size = AmpacityLogic.default_size(c_type, "5.5")
    size = parse_size_label(input(f"Size [{default_size}]: ") or default_size)

    print("\n--- Installation ---")
    print("Methods: (1) Conduit, (2) Open air / Duct")
    m_choice = input("Select method [1]: ").strip()
    method = InstallationMethod.OPEN_AIR if m_choice == "2" else InstallationMethod.CONDUIT

    temp = parse_temperature(input("Ambient temperature (°C) [25]: ") or "25")

    params = QueryParameters(conductor_type=c_type, size=size, installation_method=method, ambient_temp_c=temp)

    if method is InstallationMethod.CONDUIT:
        keys = AmpacityLogic.bundle_keys()
        print(f"Conductors in the same conduit: {', '.join(keys)}")
        params.bundle_key = input("Count [1]: ").strip() or "1"
    else:
        s_text = input("Spacing (S=d, S=2d, S=3d) [S=d]: ") or "S=d"
        spacing = parse_air_spacing(s_text)
        if spacing is None:
            print(f"Unknown spacing '{s_text}', using S=d")
            spacing = AirSpacing.S_D
        params.air_spacing = spacing
        counts = ", ".join(str(n) for n in AmpacityLogic.air_counts())
        count = parse_count(input(f"Number of cables ({counts}) [1]: ") or "1")
        params.air_count = count if count is not None else 1

    return params

def export_to_excel(params: QueryParameters):
    wb = Workbook()

    # --- Sheet 1: All sizes ---
    ws1 = wb.active
    ws1.title = "Ampacity"

    headers = ["Size (mm²)", "In (A)", "Temp. factor", "Grouping factor", "I (A)"]
    ws1.append(headers)

    header_fill = PatternFill(start_color="DDDDDD", end_color="DDDDDD", fill_type="solid")
    header_font = Font(bold=True)
    for cell in ws1[1]:
        cell.font = header_font
        cell.fill = header_fill

    for size, res in AmpacityLogic.ampacity_table(params):
        ws1.append([size, res.base_ampacity, res.temperature_factor, res.secondary_factor, res.final_ampacity])

    for col in ws1.columns:
        ws1.column_dimensions[col[0].column_letter].width = 15

    # --- Sheet 2: Conditions ---
    ws2 = wb.create_sheet("Conditions")
    ws2.append(["SAFE CURRENT - " + params.conductor_type.label])
    ws2.append(["Date:", datetime.datetime.now().strftime("%Y-%m-%d %H:%M")])
    ws2.append([])
    ws2.append(["Parameter", "Value"])
    ws2.append(["Installation", params.installation_method.label])
    ws2.append(["Ambient (°C)", params.ambient_temp_c])
    if params.installation_method is InstallationMethod.CONDUIT:
        ws2.append(["Conductors in conduit", params.bundle_key])
    else:
        ws2.append(["Spacing", params.air_spacing.value])
        ws2.append(["Cables", params.air_count])

    filename = f"Ampacity_{params.conductor_type.value}_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    wb.save(filename)
    print(f"\n[INFO] Excel generated: {filename}")

def main():
    logging.basicConfig(level=logging.WARNING, format="[%(levelname)s] %(message)s")

    print("==========================================================")
    print(" FLEXIBLE CABLE SAFE CURRENT (AMPACITY)")
    print("==========================================================")

    params = get_query_params()

    try:
        result = AmpacityLogic.compute_ampacity(params)
    except AmpacityError as e:
        print(f"Error: {e}")
        sys.exit(1)

    f_temp, f_sec = ("f1", "f2") if params.installation_method is InstallationMethod.CONDUIT else ("f3", "f4")

    print("-" * 60)
    print(f"{'Base current In':<28} | {result.base_ampacity} A")
    print(f"{'Temperature ' + f_temp + ' (' + str(result.resolved_temp_c) + '°C)':<28} | {result.temperature_factor}")
    print(f"{'Grouping ' + f_sec:<28} | {result.secondary_factor}{' (default)' if result.secondary_defaulted else ''}")
    print("-" * 60)
    print(f"{'Safe current I':<28} | {result.final_ampacity} A")
    print(f"  {result.formula}")

    ask = input("\nExport all sizes to Excel? (y/n): ").lower()
    if ask == 'y':
        export_to_excel(params)

if __name__ == "__main__":
    main()
