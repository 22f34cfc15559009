"""Pytest configuration and shared fixtures."""

import pytest

FULL_CATALOG_PAYLOAD = (
    "[JiraDataService] Custom field customfield_10114 valori: "
    "Civilia - Fattura Elettronica -> WebApp, Civilia - GeoNext -> API PDND, "
    "Civilia - GeoNext -> CDU, Civilia - GeoNext -> CEN, Civilia - GeoNext -> Data Catalogue, "
    "Civilia - GeoNext -> Editor Web, Civilia - GeoNext -> Metadati, "
    "Civilia Next - Area Affari Generali -> Albo Pretorio, "
    "Civilia Next - Area Affari Generali -> Protocollo Informatico, "
    "Civilia Next - Area Appalti e Contratti -> BDAP, "
    "Civilia Next - Area Appalti e Contratti -> Progettazione e Direzioni Lavori, "
    "Civilia Next - Area Demografia -> Anagrafe, Civilia Next - Area Demografia -> Elettorale, "
    "Civilia Next - Area Demografia -> Stato Civile, "
    "Civilia Next - Area Gestione Entrate -> Tributi Maggiori, "
    "Civilia Next - Area Risorse Umane -> Buoni Pasto, "
    "Civilia Next - Area Tecnica -> Pratiche Edilizie, "
    "Civilia Next - Area Tecnica -> Pratiche Edilizie (SUE), "
    "Civilia Next - Dup (Open) -> Dup, "
    "Civilia Next - Servizi On-Line -> AAGG - Albo Pretorio OnLine, "
    "Civilia Next - Servizi On-Line -> Servizi - IMU/TASI OnLine, "
    "Civilia Next - Welfare e Scuola -> Servizi Sociali, "
    "Civilia Next -> GeoNext, Civilia Next -> Muse, "
    "Civilia Next Area Comune -> Archivio Generale, Civilia Next Area Comune -> Next BI, "
    "Civlia Web -> Area Affari Generali, Civlia Web -> Controllo di Gestione, "
    "Customer Care - Sistema di Ticketing, Folium -> Affari Generali, "
    "Metadatamanager -> MDMGR, Sistema Informativo Territoriale -> C2C, "
    "Sistema Informativo Territoriale -> Editor PRG, Base, Reti, "
    "Sistema Informativo Territoriale -> GeoView.Net, Sistema Informativo Territoriale -> Vesta"
)


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from catalog_taxonomy.config import Settings

    return Settings(
        payload_marker="valori: ",
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def sample_payload() -> str:
    """Provide a small payload with two areas."""
    return (
        "field customfield_10114 valori: "
        "Civilia Next - Area Demografia -> Anagrafe, "
        "Civilia Next - Area Demografia -> Stato Civile, "
        "Customer Care - Portale"
    )


@pytest.fixture
def full_catalog_payload() -> str:
    """Provide a realistic application catalog payload, literal commas included."""
    return FULL_CATALOG_PAYLOAD


@pytest.fixture
def sample_labels() -> list[str]:
    """Provide one label per classifier rule."""
    return [
        "Civilia Next - Area Demografia -> Anagrafe",
        "Civilia Next Area Comune -> Organigramma",
        "Sistema Informativo Territoriale -> SIT",
        "Customer Care - Sistema di Ticketing",
        "Civilia Next - Servizi On-Line -> Portale",
        "Civilia Next -> GeoNext",
        "Folium -> Affari Generali",
        "Gestionale Legacy",
    ]
