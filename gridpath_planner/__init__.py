"""Grid Path Planner - Paint a grid and plan routes between waypoints.

An interactive grid editor featuring:
- Typed cells: waypoints, obstacles, inaccessible and weighted risky cells
- State machine-based edit modes for robust user interactions
- Weighted shortest-path routing between consecutive waypoints
- A Streamlit board for painting and viewing routes

Modules:
    core: Search engine, engine adapter and error taxonomy
    model: Data structures (GridSpec, cell classifications, CellRegistry, PathResultSet)
    session: Edit-mode state machine, PlanningSession and its Projection
    ui: Streamlit interface components (board, sidebar, dialogs, actions)

Example:
    from gridpath_planner.session import EditMode, PlanningSession

    session = PlanningSession.create(max_x=5, max_y=5)
    session.set_mode(EditMode.PLACE_WAYPOINT)
    session.tap_cell(0, 0)
    session.tap_cell(4, 4)
    session.compute()
"""
