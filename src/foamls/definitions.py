"""Keyword documentation and highlight colors, keyed by token type."""

from __future__ import annotations

from foamls.tokens import TokenType

UNKNOWN_KEYWORD = "Unknown OpenFOAM keyword."
DEFAULT_COLOR = "#FFFFFF"


def describe(tt: TokenType) -> str:
    """Return a one-sentence description of the keyword tt.

    Kinds without an authored sentence (punctuation, literals, comments,
    identifiers) get the generic UNKNOWN_KEYWORD text.
    """
    match tt:
        case TokenType.FOAM_FILE:
            return (
                "Specifies file metadata including version, format, and class "
                "of the OpenFOAM dictionary."
            )
        case TokenType.CONVERT_TO_METERS:
            return "Specifies the scaling factor to convert the mesh units to meters."
        case TokenType.BLOCKS:
            return "Defines the list of mesh blocks in blockMesh."
        case TokenType.VERTICES:
            return "Lists the vertex coordinates used to construct mesh blocks."
        case TokenType.HEX:
            return "Specifies a hexahedral block using a list of vertex indices."
        case TokenType.SIMPLE_GRADING:
            return "Describes the cell expansion ratios for mesh grading inside a block."
        case TokenType.BOUNDARY:
            return "Defines the boundaries and patches of the mesh with their types and faces."
        case TokenType.APPLICATION:
            return "Specifies the name of the solver or application to be executed."
        case TokenType.START_FROM:
            return (
                "Indicates how to determine the starting time of the simulation "
                "(e.g., 'startTime' or 'latestTime')."
            )
        case TokenType.START_TIME:
            return "Specifies the time value to start the simulation from."
        case TokenType.STOP_AT:
            return "Determines when the simulation should stop (e.g., 'endTime' or 'writeNow')."
        case TokenType.END_TIME:
            return "Specifies the end time value of the simulation."
        case TokenType.DELTA_T:
            return "Defines the time step size used for time integration."
        case TokenType.WRITE_CONTROL:
            return (
                "Determines the control strategy for writing output "
                "(e.g., 'timeStep', 'runTime')."
            )
        case TokenType.WRITE_INTERVAL:
            return "Specifies the interval at which results are written to disk."
        case TokenType.PURGE_WRITE:
            return "Limits the number of time directories stored by deleting old ones."
        case TokenType.WRITE_FORMAT:
            return "Specifies the format (e.g., ascii, binary) in which data is written."
        case TokenType.WRITE_PRECISION:
            return "Sets the numerical precision of written output."
        case TokenType.WRITE_COMPRESSION:
            return "Controls whether the output files are compressed (e.g., 'on' or 'off')."
        case TokenType.TIME_FORMAT:
            return (
                "Specifies the format used to write time directories "
                "(e.g., 'general' or 'fixed')."
            )
        case TokenType.TIME_PRECISION:
            return "Sets the precision of time values used in directory names."
        case TokenType.RUN_TIME_MODIFIABLE:
            return "Determines if dictionaries can be modified during a running simulation."
        case TokenType.DDT_SCHEMES:
            return "Defines the schemes for time derivative discretization."
        case TokenType.GRAD_SCHEMES:
            return "Specifies the gradient calculation schemes."
        case TokenType.DIV_SCHEMES:
            return "Defines the discretization schemes for divergence terms."
        case TokenType.LAPLACIAN_SCHEMES:
            return "Specifies the schemes for discretizing Laplacian terms."
        case TokenType.INTERPOLATION_SCHEMES:
            return "Defines the interpolation schemes for field values at cell faces."
        case TokenType.SN_GRAD_SCHEMES:
            return "Specifies the schemes used for surface-normal gradient calculations."
        case TokenType.SOLVERS:
            return "Defines the linear solvers and their parameters for solving different fields."
        case TokenType.DIMENSIONS:
            return "Specifies the physical dimensions of a field in SI units using a 7-tuple."
        case TokenType.INTERNAL_FIELD:
            return "Defines the initial value of the field inside the domain."
        case TokenType.BOUNDARY_FIELD:
            return "Specifies boundary conditions for a field on each patch."
        case TokenType.TYPE:
            return "Specifies the type of a dictionary entry or boundary condition."
        case TokenType.VALUE:
            return "Used to assign a value in boundary or internal field specifications."
        case TokenType.FORMAT:
            return "Declares in the FoamFile header whether the file body is ascii or binary."
        case TokenType.ASCII:
            return "Selects plain-text storage for the file contents."
        case TokenType.CLASS:
            return "Names the OpenFOAM data class stored in the file (e.g., 'volVectorField')."
        case TokenType.VOL_VECTOR_FIELD:
            return "A vector field defined at cell centres, such as velocity."
        case TokenType.OBJECT:
            return "Gives the name of the object stored in the file, usually the file name."
        case TokenType.U:
            return "The velocity field."
        case TokenType.UNIFORM:
            return "Assigns the same value to every cell or face of a field."
        case TokenType.MOVING_WALL:
            return "Conventional patch name for the driven lid in the cavity tutorial."
        case TokenType.FIXED_WALLS:
            return "Conventional patch name for the stationary walls in the cavity tutorial."
        case TokenType.FRONT_AND_BACK:
            return "Conventional patch name for the front and back faces of a 2D case."
        case TokenType.FIXED_VALUE:
            return "Boundary condition that fixes the field to a prescribed value on the patch."
        case TokenType.NO_SLIP:
            return "Boundary condition that sets the velocity to zero at a wall."
        case TokenType.EMPTY:
            return "Patch type for faces normal to a direction that is not solved for."
        case _:
            return UNKNOWN_KEYWORD


def token_color(tt: TokenType) -> str:
    """Return the highlight color for tt as a ``#RRGGBB`` string."""
    match tt:
        case TokenType.HEX:
            return "#FF0000"
        case TokenType.VOL_VECTOR_FIELD:
            return "#00FF00"
        case TokenType.OBJECT:
            return "#0000FF"
        case TokenType.U:
            return "#FFFF00"
        case TokenType.UNIFORM:
            return "#FF00FF"
        case TokenType.MOVING_WALL:
            return "#00FFFF"
        case TokenType.FIXED_VALUE:
            return "#800080"
        case TokenType.FRONT_AND_BACK:
            return "#808080"
        case TokenType.NO_SLIP:
            return "#FFA500"
        case TokenType.EMPTY:
            return "#800000"
        case TokenType.FIXED_WALLS:
            return "#008000"
        case _:
            return DEFAULT_COLOR
