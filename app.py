# === FRONT MATTER ===
# libraries
import json
import streamlit as st
import networkx as nx
import matplotlib.pyplot as plt
from io import BytesIO  # to use as buffer for export options
from pathlib import Path
from tempfile import TemporaryDirectory
# functions
from critpath.errors import ScheduleError
from critpath.export import summary_frame, to_dot, to_node_link
from critpath.input_parser import load_file, parse_df, sample_records
from critpath.logger import setup_logging
from critpath.schedule import compute_schedule

setup_logging()


def read_upload(uploaded_file):
    """
    input: streamlit upload (csv, json, or excel)
    output: pandas dataframe; shows an error and stops the script on a bad file
    """
    # load_file picks the reader from the extension, so hand it a real file with the same name
    with TemporaryDirectory() as tmp:
        path = Path(tmp) / uploaded_file.name
        path.write_bytes(uploaded_file.getvalue())
        try:
            return load_file(path)
        except (ScheduleError, ValueError) as e:
            st.error(f"Error loading file: {e}")
            st.stop()


def png_download(fig, file_name):
    buffer = BytesIO()
    fig.savefig(buffer, format="png", bbox_inches="tight")
    st.download_button(
        label="Download Chart as PNG",
        data=buffer.getvalue(),
        file_name=file_name,
        mime="image/png"
    )


# streamlit preview- ui
st.title("Project Planner: Critical Path")

# about app sidebar
with st.sidebar.expander("**About This App**", expanded=True):
    st.markdown("""
    Upload a CSV, JSON, or Excel file with columns for task, duration and predecessors
    (comma separated, `-` or blank for none), and:
    - Map task dependencies
    - Spot what's critical and what has slack
    - Visualize your timeline with a Gantt chart or a network diagram
    - Export the schedule as JSON or Graphviz DOT
    """)

#create tabs for convenience
upload, result, viz = st.tabs(["Upload", "Results", "Visualizations"])

# === File Upload & Configuration ===
with upload:
    uploaded_file = st.file_uploader("Upload task file (.csv, .json, or .xlsx)", type=["csv", "json", "xlsx"])
    use_sample = st.toggle("Use the demo project instead", value=uploaded_file is None)
    unit = st.selectbox("Select time unit for duration: ", [" ", "hours", "days", "weeks", "months"])
    on_duplicate = st.radio("Repeated task ids", ["overwrite", "error"], horizontal=True)

    records = None
    if uploaded_file and not use_sample:
        df = read_upload(uploaded_file)
        st.info(f"**Preview:** ({df.shape[0]} rows x {df.shape[1]} columns)")
        with st.expander("Show full dataset"):
            st.dataframe(df) # gives preview of uploaded data as a table
        try:
            records = parse_df(df)
        except ScheduleError as e:
            st.error(str(e))
            st.stop()
    elif use_sample:
        records = sample_records()

    schedule = None
    if records is not None:
        try:
            schedule = compute_schedule(records, on_duplicate=on_duplicate)
        except ScheduleError as e:
            # a cycle or bad row: nothing partial is shown
            st.error(str(e))
            st.stop()
        st.success(f"Successfully scheduled {len(schedule.order)} tasks!")
        if schedule.dangling:
            missing = sorted({pred for _, pred in schedule.dangling})
            st.warning(f"Unrecognized predecessors ignored: {', '.join(missing)}")

# === CPM Results ===
with result:
    if schedule is not None:
        st.dataframe(summary_frame(schedule))
        st.markdown(f"Total Duration for Project: {schedule.project_duration} {unit}")
        st.markdown(f"Critical path: **{' → '.join(schedule.critical_path)}**")
        st.info(
            "The **total project duration** is based on the longest sequence of dependent tasks "
            "(the critical path). Any delay in these tasks will directly affect the project completion time."
        )
        c1, c2 = st.columns(2)
        with c1:
            st.download_button(
                label="Download JSON",
                data=json.dumps(to_node_link(schedule), indent=2),
                file_name="schedule.json",
                mime="application/json"
            )
        with c2:
            st.download_button(
                label="Download DOT",
                data=to_dot(schedule),
                file_name="schedule.dot",
                mime="text/vnd.graphviz"
            )

# === Visualizations ===
with viz:
    if schedule is not None:
        G = schedule.graph
        cp = schedule.critical_path
        c1, c2 = st.columns(2)
        with c1:
            gantt_bool = st.toggle("Gantt Chart")
        with c2:
            only_cp = st.toggle("Show only critical path")
        # task separation based on toggle choice
        tasks_to_plot = cp if only_cp else schedule.order

        # --- Gantt Chart ---
        if gantt_bool:
            fig, ax = plt.subplots(figsize=(8, 4), facecolor='whitesmoke')
            ax.set_facecolor("whitesmoke")
            for i, task in enumerate(tasks_to_plot):
                node = G.nodes[task]
                color = "#EF9A9A" if node["slack"] == 0 else "#BBDEFB"
                ax.barh(
                    y=i,                    #row number
                    width=node["duration"], #how long the task takes
                    left=node["es"],        #where the bar starts on the x-axis
                    height=0.4,
                    color=color,            #red or blue
                    edgecolor="#1a1a1a"
                )
                ax.text(
                    node["ef"] + 0.1, i, f"s ={node['slack']}",
                    ha="left", va="center", color="#1a1a1a", fontsize=6, fontweight="medium"
                )
            ax.set_xlim(0, schedule.project_duration + 2)    # breathing space for the labels
            ax.set_yticks(range(len(tasks_to_plot)))
            ax.set_yticklabels(tasks_to_plot)
            ax.invert_yaxis()
            ax.set_xlabel(f"Time ({unit.strip() or 'units'})")
            ax.set_title("Gantt Chart with Critical Tasks")
            plt.grid(axis="x", linestyle=":", color="gray", alpha=0.5)
            st.pyplot(fig)
            png_download(fig, "gantt_chart.png")

        # --- Network Diagram ---
        else:
            crit_edges = schedule.critical_edges()
            if only_cp:
                G_sub = G.edge_subgraph(crit_edges).copy() if crit_edges else G.subgraph(cp).copy()
            else:
                G_sub = G.copy()
            pos = nx.spring_layout(G_sub, seed=42)
            node_colors = ["#EF9A9A" if G.nodes[n]["slack"] == 0 else "#BBDEFB" for n in G_sub.nodes()]
            edge_colors = ["#E57373" if e in crit_edges else "#64B5F6" for e in G_sub.edges()]
            fig, ax = plt.subplots(figsize=(8, 6), facecolor="whitesmoke")
            ax.set_facecolor("whitesmoke")
            nx.draw(
                G_sub,
                pos,
                with_labels=True,
                node_color=node_colors,
                edge_color=edge_colors,
                node_size=1500,
                font_weight="bold",
                font_color="#1a1a1a",
                ax=ax
            )
            labels = {node: f"\n\ns={G.nodes[node]['slack']}" for node in G_sub.nodes}
            nx.draw_networkx_labels(G_sub, pos, labels=labels, font_size=9, horizontalalignment="center", ax=ax)
            ax.set_title("Network Diagram with Critical Path")
            st.pyplot(fig)
            png_download(fig, "dag_network.png")

        with st.expander("Schedule table"):
            st.dataframe(summary_frame(schedule).set_index("Task"))
