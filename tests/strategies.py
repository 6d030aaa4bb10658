"""Hypothesis strategies for property-based testing of applyable."""

from hypothesis import strategies as st

# -----------------------------------------------------------------------------
# Values
# -----------------------------------------------------------------------------

scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=50),
    st.binary(max_size=50),
)

values = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.tuples(children, children),
        st.dictionaries(st.text(max_size=10), children, max_size=5),
    ),
    max_leaves=10,
)

# -----------------------------------------------------------------------------
# Single-argument functions defined for every value above
# -----------------------------------------------------------------------------

unary_functions = st.sampled_from([
    str,
    repr,
    type,
    bool,
    lambda x: (x,),
    lambda x: [x, x],
    lambda x: {'wrapped': x},
])

exceptions = st.sampled_from([
    ValueError('bad value'),
    TypeError('bad type'),
    KeyError('missing'),
    RuntimeError('boom'),
])
