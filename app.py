from __future__ import annotations
import streamlit as st
import pandas as pd
from teamgen.errors import TeamGenError
from teamgen.sheets import list_sheet_names
from teamgen.roster import read_roster, dedupe_students
from teamgen.partition import split_into_teams
from teamgen.stats import summarize_teams
from teamgen.export import teams_to_frame, export_teams_to_excel_bytes
from teamgen.settings import load_settings, setup_logging

st.set_page_config(page_title="Student Team Generator", layout="wide")
st.title("Student Team Generator")

try:
    SETTINGS = load_settings()
except ValueError as e:
    st.error(f"Invalid settings: {e}")
    st.stop()
setup_logging(SETTINGS)
# =========================

# Upload
# =========================
upload = st.file_uploader(
    "Upload the student roster (XLSX/CSV): ID, Name, RegId, Dept",
    type=["xlsx", "csv"],
    accept_multiple_files=False,
)

if not upload:
    st.warning("Upload a roster file.")
    st.stop()

data = upload.getvalue()

try:
    sheet_names = list_sheet_names(data, filename=upload.name)
except TeamGenError as e:
    st.error(e.message)
    st.stop()
# =========================

# Options
# =========================
c1, c2, c3, c4 = st.columns(4)
with c1:
    sheet = st.selectbox("Sheet", sheet_names, index=0)
with c2:
    team_size = st.number_input("Team size", min_value=1, value=max(1, SETTINGS.team_size), step=1)
with c3:
    shuffle = st.checkbox("Shuffle students", value=SETTINGS.shuffle)
    dedupe = st.checkbox("Drop repeated IDs", value=False)
with c4:
    seed_txt = st.text_input("Seed (optional)", value="")
    split_sheets = st.checkbox("One sheet per team", value=SETTINGS.split_sheets)

seed = None
if seed_txt.strip():
    try:
        seed = int(seed_txt.strip())
    except ValueError:
        st.error("Seed must be a whole number")
        st.stop()

if not st.button("Generate teams"):
    st.stop()
# =========================

# Run
# =========================
try:
    students = read_roster(data, sheet, filename=upload.name)
except TeamGenError as e:
    st.error(e.message)
    if e.recommendation:
        st.info(e.recommendation)
    st.stop()

if dedupe:
    students, duplicates = dedupe_students(students)
    if duplicates:
        st.warning(f"Dropped {len(duplicates)} rows with a repeated ID: " + ", ".join(sorted({d.id for d in duplicates})))

if not students:
    st.warning("No students found in the selected sheet.")
    st.stop()

st.info(f"Found {len(students)} students")

teams = split_into_teams(students, int(team_size), shuffle, seed=seed)
stats = summarize_teams(teams)

m1, m2, m3, m4 = st.columns(4)
m1.metric("Teams", stats.team_count)
m2.metric("Students", stats.student_count)
m3.metric("Min / max size", f"{stats.min_size} / {stats.max_size}")
m4.metric("Average size", f"{stats.mean_size:.2f}")

st.subheader("Team assignment")
st.dataframe(teams_to_frame(teams), width="stretch")

st.subheader("Team sizes")
sizes = pd.DataFrame({"Team Name": [t.label for t in teams], "Students": [len(t) for t in teams]})
st.dataframe(sizes, width="stretch")

try:
    xbytes = export_teams_to_excel_bytes(teams, split_sheets=split_sheets, stats=stats)
except TeamGenError as e:
    st.error(e.message)
    st.stop()

st.download_button(
    "Download teams (Excel)",
    data=xbytes,
    file_name="student_teams.xlsx",
    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)
