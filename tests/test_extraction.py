import logging

from accession_resolver.config import ResolverOptions
from accession_resolver.models.data_schemas import ResolutionRequest
from accession_resolver.modules.extraction import (
    _pick_first_field,
    extract_header,
    normalize_family,
    resolve_pipes,
    strip_quotes,
)
from accession_resolver.modules.stage import WorkingState


def _run(stage, accession, options=None):
    request = ResolutionRequest(raw_accession=accession, database="")
    return stage(WorkingState(accession), request, options or ResolverOptions())


def test_header_truncates_malformed_swissprot_suffix():
    assert _run(extract_header, "Q8C7X2-00-00-00").state.accession == "Q8C7X2"


def test_header_keeps_swissprot_from_description():
    assert _run(extract_header, "P12105_1 [Segment 1 of 3] Collagen alpha 1(III) ch").state.accession == "P12105"
    assert _run(extract_header, "O00264, NP_006658").state.accession == "O00264"


def test_header_keeps_gi_from_description():
    assert _run(extract_header, "gi|1234234| some protein").state.accession == "1234234"


def test_header_rejects_small_gi():
    outcome = _run(extract_header, "12 kDa protein")
    assert outcome.is_rejected


def test_header_falls_back_to_first_word():
    assert _run(extract_header, "JQ1489 thymosin beta-4 - African clawed frog").state.accession == "JQ1489"


def test_header_strips_after_comma():
    assert _run(extract_header, "NP_003371,P08670").state.accession == "NP_003371"


def test_header_ignores_leading_space():
    assert _run(extract_header, " ABCDEF").state.accession == " ABCDEF"


def test_pipes_prefer_swissprot():
    assert _run(resolve_pipes, "sp|P12345|BLA_HUMAN").state.accession == "P12345"


def test_pipes_gi_before_other_fields():
    assert _run(resolve_pipes, "gi|108562577|ref|YP_626893.1|").state.accession == "108562577"


def test_pipes_small_gi_falls_through_to_remainder():
    outcome = _run(resolve_pipes, "gi|999|")
    assert not outcome.is_rejected
    assert outcome.state.accession == "999|"


def test_pipes_middle_field_swissprot_or_gi():
    assert _run(resolve_pipes, "xx|q9xyz1|yy").state.accession == "Q9XYZ1"
    assert _run(resolve_pipes, "emb|12345678|CAA1").state.accession == "12345678"


def test_pipes_first_field_swissprot():
    assert _pick_first_field("O34528|yrvN", ResolverOptions()) == "O34528"
    assert _pick_first_field("ENSP1|yrvN", ResolverOptions()) is None


def test_pipes_fallback_keeps_remainder():
    assert _run(resolve_pipes, "abc|ENSP00000354587").state.accession == "ENSP00000354587"


def test_pipes_leading_pipe_untouched():
    assert _run(resolve_pipes, "|P12345").state.accession == "|P12345"


def test_family_uniref():
    assert _run(normalize_family, "UniRef100_P12345").state.accession == "P12345"
    assert _run(normalize_family, "UniRef90Q9XYZ1").state.accession == "Q9XYZ1"


def test_family_bad_ipi_prefix():
    assert _run(normalize_family, "IPIIPI00012345").state.accession == "IPI00012345"
    assert _run(normalize_family, "IPIP12345").state.accession == "P12345"


def test_family_ipi_embedded_uniprot():
    assert _run(normalize_family, "IPI00P12345-2").state.accession == "P12345-2"


def test_family_plain_ipi_untouched():
    assert _run(normalize_family, "IPI00012345").state.accession == "IPI00012345"


def test_family_truncated_ipi_rejected(caplog):
    with caplog.at_level(logging.ERROR):
        outcome = _run(normalize_family, "IPI")
    assert outcome.is_rejected
    assert "Invalid IPI accession: IPI" in caplog.text


def test_quotes_stripped_both_sides():
    assert _run(strip_quotes, '"P12345"').state.accession == "P12345"
    assert _run(strip_quotes, 'x"P12345').state.accession == "P12345"
    assert _run(strip_quotes, '"P12345').state.accession == "P12345"
    assert _run(strip_quotes, 'a"P12345"b"').state.accession == 'P12345"b'


def test_header_keeps_ten_character_uniprot_accession():
    assert _run(extract_header, "A0A024R161 description").state.accession == "A0A024R161"


def test_pipes_do_not_cut_ten_character_uniprot_accession():
    assert _run(resolve_pipes, "tr|A0A024R161|A0A024R161_HUMAN").state.accession == "A0A024R161|A0A024R161_HUMAN"


def test_pipes_trm_prefix():
    assert _run(resolve_pipes, "trm|P12345|BLA_HUMAN").state.accession == "P12345"
