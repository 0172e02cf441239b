"""Streamlit front-end for the fixture archive validator."""
from __future__ import annotations

import pandas as pd
import streamlit as st

from fixture_checker import (
    ArchiveValidationContext,
    FixtureAssertionError,
    FixtureParseError,
    InMemoryResourceLoader,
    ValidateArchiveUseCase,
)
from fixture_checker.domain.results import RunReport
from fixture_checker.presentation.report import render_csv, results_to_rows


st.set_page_config(page_title="Fixture Validator", layout="wide")
st.title("Fixture Archive Validation")


def run_validation(name: str, archive_bytes: bytes) -> RunReport:
    loader = InMemoryResourceLoader({name: archive_bytes})
    use_case = ValidateArchiveUseCase(ArchiveValidationContext(loader=loader))
    return use_case.execute(name)


uploaded = st.file_uploader("Upload fixture archive", type=["zip"])
run_btn = st.button("Run Validation", disabled=uploaded is None)

if run_btn and uploaded is not None:
    with st.spinner("Validating..."):
        try:
            report = run_validation(uploaded.name, uploaded.read())
        except FixtureAssertionError as exc:
            st.error(f"Check failed for {exc.entry_name}: {exc}")
            st.stop()
        except FixtureParseError as exc:
            st.error(str(exc))
            st.stop()

    st.subheader("Summary")
    summary = report.summary
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Entries", summary.total_entries)
    col2.metric("Passed", summary.passed)
    col3.metric("Soft failures", summary.soft_failures)
    col4.metric("Skipped", summary.skipped)

    if report.has_soft_failures():
        st.warning("Some soft checks did not pass.")

    st.dataframe(pd.DataFrame(results_to_rows(report.results)))
    st.download_button(
        "Download results CSV",
        data=render_csv(report.results),
        file_name="fixture_results.csv",
        mime="text/csv",
    )
