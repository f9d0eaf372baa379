"""
Dashboard Interativo - Dimensionamento de Lotes por Programação Dinâmica
Execute com: streamlit run dashboard.py
"""

import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px
import plotly.graph_objects as go
import plotly.io as pio

from src.config import MAX_HORIZON, PARAMS_SCENARIO_1, SAMPLE_DEMAND_CSV
from src.decision_support import compare_strategies, format_cost, result_message
from src.exceptions import InvalidInput
from src.inventory.lot_sizing import cost_to_go
from src.io_load import load_demand_csv
from src.preprocess import parse_lot_sizing_request
from src.reporting.decision_pdf import build_lot_sizing_pdf

# ============ CONFIGURAÇÃO DA PÁGINA ============
st.set_page_config(
    page_title="Dimensionamento de Lotes - Dashboard",
    page_icon="📦",
    layout="wide",
    initial_sidebar_state="expanded"
)

# ============ TEMA GLOBAL (DARK + VERMELHO) ============
pio.templates.default = "plotly_dark"
px.defaults.template = "plotly_dark"
px.defaults.color_discrete_sequence = ["#ff4d57", "#c1121f", "#8c1118", "#ff8a92"]

# ============ ESTILO CSS CUSTOMIZADO ============
st.markdown("""
<style>
    :root {
        --bg-main: #0d0d0f;
        --bg-card: #1f1f24;
        --accent: #c1121f;
        --text-main: #f4f4f5;
    }
    .stApp, [data-testid="stAppViewContainer"] {
        background: radial-gradient(circle at top right, rgba(193, 18, 31, 0.18), transparent 35%), var(--bg-main);
        color: var(--text-main);
    }
    .main-header {
        font-size: 2.2rem;
        font-weight: 700;
        background: linear-gradient(90deg, #ff4d57 0%, #c1121f 55%, #8c1118 100%);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
        text-align: center;
        padding: 1rem 0;
    }
    [data-testid="stMetric"] {
        background-color: var(--bg-card);
        padding: 1rem;
        border-radius: 0.6rem;
        border-left: 4px solid var(--accent);
    }
</style>
""", unsafe_allow_html=True)


# ============ CACHE DE DADOS ============
@st.cache_data
def load_sample_demand():
    return ", ".join(f"{d:g}" for d in load_demand_csv(SAMPLE_DEMAND_CSV))


# ============ SIDEBAR ============
with st.sidebar:
    st.markdown("## ⚙️ Parâmetros")

    use_sample = st.checkbox(
        "Usar demanda de exemplo",
        value=False,
        help=f"Carrega {SAMPLE_DEMAND_CSV.name}."
    )
    default_demand = "10, 10"
    if use_sample:
        try:
            default_demand = load_sample_demand()
        except InvalidInput as e:
            st.warning(str(e))

    demand_text = st.text_area(
        "Demanda por Período (separada por vírgulas)",
        value=default_demand,
        help=f"Até {MAX_HORIZON} períodos."
    )
    holding_text = st.text_input(
        "Custo de Manutenção por Unidade por Período (h)",
        value=f"{PARAMS_SCENARIO_1['h']:g}"
    )
    order_text = st.text_input(
        "Custo por Pedido (K)",
        value=f"{PARAMS_SCENARIO_1['K']:g}"
    )
    periods_text = st.text_input(
        "Número de Períodos (opcional)",
        value="",
        help="Se informado, deve coincidir com a quantidade de valores de demanda."
    )

    calculate = st.button("📦 Calcular Custo Mínimo", type="primary")

# ============ CONTEÚDO ============
st.markdown('<div class="main-header">Dimensionamento de Lotes - Programação Dinâmica</div>',
            unsafe_allow_html=True)

if calculate:
    try:
        request = parse_lot_sizing_request(demand_text, holding_text, order_text, periods_text)
    except InvalidInput as e:
        st.error(str(e))
    else:
        profile = cost_to_go(request.demand, request.holding_cost, request.order_cost)
        comparison = compare_strategies(request.demand, request.holding_cost, request.order_cost)
        min_cost = float(profile[0])

        st.success(result_message(min_cost))

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Custo Mínimo Total", format_cost(min_cost))
        with col2:
            st.metric("Períodos", request.horizon)
        with col3:
            st.metric("Demanda Total", f"{np.sum(request.demand):,.2f}")

        st.markdown("---")
        st.markdown("### 📊 Comparação de Estratégias")
        st.dataframe(comparison.drop(columns="Codigo").style.format({
            'Custo Total': '{:,.2f}',
            'Economia vs Lote a Lote (%)': '{:.1f}%'
        }), width='stretch')

        st.markdown("### 📈 Custo Restante por Período Inicial")
        profile_df = pd.DataFrame({
            'Período': np.arange(1, request.horizon + 1),
            'Demanda': request.demand,
            'Custo Restante': profile[:-1],
        })
        fig = go.Figure()
        fig.add_trace(go.Bar(x=profile_df['Período'], y=profile_df['Demanda'], name='Demanda', yaxis='y2',
                             opacity=0.35))
        fig.add_trace(go.Scatter(x=profile_df['Período'], y=profile_df['Custo Restante'],
                                 mode='lines+markers', name='Custo Restante'))
        fig.update_layout(
            height=380,
            yaxis=dict(title='Custo Restante'),
            yaxis2=dict(title='Demanda', overlaying='y', side='right'),
        )
        st.plotly_chart(fig, width='stretch')

        st.download_button(
            "📄 Baixar Relatório (PDF)",
            data=build_lot_sizing_pdf(request, comparison, profile),
            file_name="relatorio_lotes.pdf",
            mime="application/pdf",
        )
else:
    st.info("Informe a demanda e os custos na barra lateral e clique em **Calcular Custo Mínimo**.")

# ============ FOOTER ============
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #888; padding: 1rem;'>
        📦 Dimensionamento de Lotes Multi-Período | Programação Dinâmica
    </div>
    """,
    unsafe_allow_html=True
)
