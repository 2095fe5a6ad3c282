"""Rucksack reorganization: find each group's badge and sum its priority."""

from __future__ import annotations

from collections.abc import Iterable

GROUP_SIZE = 3

_EXAMPLE = (
    "vJrwpWtwJgWrhcsFMMfFFhFp",
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
    "PmmdzqPrVvPwwTWBwg",
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
    "ttgJtRGJQctTZtZT",
    "CrZsJsPPZsGzwwsLwLmpwMDw",
)

_RUCKSACKS = """\
rZTmmqbBrmBvSTCwDDtlwjqnqnnq
dhgQHhPfVgPlPdFzFzFgdptCQjtnwCntjsCppRtRND
lVdVHWGPvTvmrrBW
GmJBqwPLhfPBfJfvfffFmwtjDprpzVpVMpcDrVjzzcjpML
HgWnRnWggWbNTWbCnPCgCnsjcVDrjMrdzjprMMrzcHDrDr
SsSsRsCSPSPBvtJt
BLtwwTBmLSTlMsjdZmFZZP
hzbzNNrbqQbhQDDrhCprbhDCpvFJJPjMZJZgjjPdlvZjZvvl
fbNrqrVDfdfGzqcHTBTVHwcTSHcH
lcDdcrCDCRHJHBllPR
tNGQwQhtzLhJBRHbPMBMjGBj
NZZZpVqqFqpQpCTZcTnrTrnJJC
BSNLNzbLLsMGSDLSsSBdVwTVQFdTVTtqgTwNVN
lRjplvmWpgrqwlVFFr
mfRCpWwvChZCBGSzZG
mDSlGBGwhGhmLHCQnMMVMLMVFJ
WTNfjNgzNdgNWfsgsWWcWgfrVrnnFHQbrHvFrVVdHMrnCr
FpcggcNttFfqSqDtwBDmhZ
HzNsHbGsddQHPrsNPNsTnNjMbjVbcVlMLjMjLtlttjjv
CQfBZDQfWJlJlLJhvMMv
WwwmWRfFwmCmwwzQzzzrdGNHFzNT
JDvhJfdZZTdCTnmmTH
qbPcsqbjcbstjbgnvqpRCBTCmgCm
WPbPtbtVjWQsPvSVzSZLMDMVfLZJ
NjMbTZPjHjbdBqNBqFqDFz
LCcLSRLStRrLHShCtRfcpCtpQVqqDFDFqDdFpBddDQQFdB
htCGtrSJLfScvwJvggbgwHgW
hmPTmfFPwBFHhsBstJldltstVDSVrrpD
CjzNGQjnRMMvMngMLGRVRBltVrVppqptVSqlVJ
cLBjgjGGGCgvLLnhZThwcfTHPTcPmw
SzwsVwcGsTVTmzmgjsLsmWWnGJZbbJbZtZqnDJntGq
NHQvpvNRflHvQpPMlbtbZqbFDnWlqVrD
dpPQVdpHMPRBpfCszCmsLsmcjdSg
wZZGGrnGVvZGPTcTnGvVCVpmpJSgCJtNpWgWVgmC
MdMRqqzMLDtQDQmzJg
HBMdRLLBLBdbbBLHlRjLrHPPnTvGtTcwhGrhZtvh
fcbcPWmvPvftWbDNVJJDrrhsJs
wQvzqvpQQzHQwTTNVhrBGJTJ
ZCMvzHMRCqggmWmndPngnn
VjvVJvjdgjJNTVgdpjRttsTHSsbFqqRHSbBR
nrfZLZCZnLnCCncZCrCQLSsFHHqtsSsSSBcHGtHsFh
nQlLMrmwZtmwCMmMwZmtLLggvNvVjjNJglpDgzNdJJvN
bCjQbTzCBlCvpqPTbZphtWWRhtddmDRRdRhPhh
sLJsnJFcsnJcMMjNnfsjDDcDWcRgggtmwVRtVmhh
sMsJLFfGrfFnrSNJjHzlTCCCQzpbBpzQzSBQ
gzFbjgqljdqblbbddBZTMvTBdMsVvm
SHpGWBCtSPhNpPSSSpwSNGNSTLTVVsZsLrvRrRvVLLRCvTvm
NwhHwPhDtSGpbDcBQqczbBBj
BhzLDSflLlTTRfqGpJZZQsqfNF
ndCmMHHRPbCjCwVPVmjtwdMVsNGJQpZQsJqJqNJdFqJZFrNq
CtwbRcRbttHBSgTcgShvTz
pffmzCtppTSWtzdhbJdZvvHVnvdHVV
WMlLWRGGQWMGrQJcVbvbHnvQHbhv
LFwRFDlqFPWfTszp
sbfFTbbbzJzfbJZSbnsnfTchGWWJGlhWvvBGltgVttgWgg
LLLDpHwMDLmNjmChVWWBwthrGQvgQl
dLMLDMLBNddPHmpMPfqPcPzcsSbbccqb
MNGMPvHTnfTfgSFrSMMgwFMw
QQRpjBsqhRQsldpqRQQQmjZFtrrzSFFccvSWwwjwFWZS
smsBbQlRlmDpDBqpqblpLbLLfTfNVPVVGnTvTLbb
gsmFlVCShjVwNNDNgWBNHg
dMtQvtQRrtbLMqMnqqsq
GQfGQPRtrPddPtvcvcQZRvRpJlVJFTlpZTVJpFJsSCFJjh
LFmpcmhNfhhnjStshM
qWTCCQrqlQBQcJCqrJdlHDdnRtngRStnPjgDSgSsjM
CZWrqTbllrClJZWbVfmmZcvVzmGZmfpv
qJLCqjwjjJnFqnDQQfqlQMfMQlMg
zmHWPhGGZVGpcCWMsWRRfBBRDs
bdpCcGmZdNFTwnSjrd
TTtqjWvQjZTtzwWtdBCMdBMqdGCBRnhR
bpJlcNFVzbcBhCMMCChbMP
cJVgrplDcslrlrpFzwTHQsSTWLQtjWvLWj
hWlmVhlpcNpScSVtNbjrbGqdHGjgQrdrRdqG
LPBDCvFszTCzFzFzBBffHrJrrGHRHsgRjsjrjJqc
DTCMMzzvvnDvLvLDTTBTCMFBpWpthShmwmmWmwchptnhwWWt
dfHqNQSQQNQBHHZJfJCMCfVcRJCZ
GjLrDjgvFrFzjDgPGvLzgmmjCslRZMMCststJMlRcPVTRJJM
vjmmvrnzDDLVzrdSWNBQnWwdhHhH
jTmMBMNBTVSqNgBTjgNMqMTgWZttCmLfpQQZQWtLCdCGGtWC
zzVVbhFcbzstWCZpsftsQZ
whwhwPnDhHRhbRVHcSNllvMnNnjMjSBJMl
nSvQgHWtZvHlgtvqgqngjSFFFDNSfsbbbjGfcsSr
PPVRdNwRLhdLLCCwbscBBfGfbLjjjDbs
zVPPhMhMmhhVppRpMNRPhMQnHqZtHZvgQzWgQgvnqnnq
JdFHDSShfgDNMhGTBlwGGJqjjJTr
PCnWnsvpzPnmLvmsQGRGWrwlWbljwTjFGl
PtnLzQCQLfSFctdNhN
cTrjrCNrLjTFCTrLCdSVNVlJVSVVGJftNp
swQHQDsQGRZGffQV
ggffMhhvgswDgDnhhfCcTjrcTjWBWCMmcjjc
wGHvHCvWlMLlhGWwvvwlNnRBRdDNDBLDRVVDFdBD
MtJJTPTTQNFRNFRfTn
crSsmmJjmtgWmMhwWMCw
sQQHWGsWcWWrZQQshNtHFNBCNBqHFwHB
jSLbMSdfjSjFtFghNtFBMt
RSdmtLmSLLzSLdjjdTTbVvsVVsvZcZQzWPWcQrrW
PCCTzTgDgzVZZLgcgcdswMMMgs
hSrqdqRQSjqtNqcsGWcGLwMGMf
tlQJRJSRjpJjZPdpDTdHbzTn
pqBGDDtQBDLVhfCtCZVV
bTNFcljgbdlFjbldjFdTTcfZqZVsLhgfVLhVhZVHfZwC
McJjFbvTWvmRqGRr
JRcsJDfgncfHnqSBqGSTGQsTTz
vlBlLlpNWpPhVmTQpQSzqbqQ
CBPvjFNMlFhCCRtZJZZHfg
RFQQTdQQLtThDhfRcHdLfFcHJCWtbbPnJWJPNJbnJsvstvJv
ZmMlMlwwMrVzwVqrSqmZrqbplpNWFbWJnvvspWWNslNs
gwwmFrgMGgFqGTHRhHjDRTHH
dNfQvLdQsvSLsHsLBgNWVggJJCWCDJgnJJ
ZTGcflFlFRfhbwhbPcbbbWVWrMVMnDJCCWmVnDJCmF
lTfZTpjjZhPhRcqtBtsdSQpqQvtv
frfccJzjTBwWwcJwjrwcBVCVTRCGnpsGGSmpVSSpDH
hhhvghZvZlZvghPbdtqGpGVCRHGGmsRmpsvGRV
MdPCNqdtgZdZgcWMLzcffBcWzM
LdsfZNRsRWvvfLSsCpSgCDJbPcCp
MqTVtHHThllGMthlBHzcSzGGSFppPgbJDFbF
nVHwVlHmlhRWdjjjLvwD
whhWFjjzhGmGCrFFFzvtZsLZVStNZWLNpvtv
nqPMBdMQBqJnnfqdsSNfpvtZsSNtNpLp
HJHnQHqQlhwLlhzmGh
nMlmnfHmfjjmflLlLdzJTrsrBLJJLBbBSJrJ
pZRpFFDWctFPNtWvbbrTqrszTbqbcBqr
RpRGNPPvPFsNvflmdfwMGHhmmH
PjPzphfpJFPvFRHDbP
QlLlBcvBvnWCWcVCnFTTSnFDNdSRRRHN
sVtlVcVtmqjMJphrfvJs
dRRHRfrdRHHlCTTprlNCvhVVvhzpQhVvtmntmhtz
JMDJBLwQMBDDwZgJnhSzhmWStMvzbbmm
PPwJwGqPGQcDcHHjCqRlRCjrCN
GgGgbGSGzGbMBBzGDVFbDMRpmcWWTTfcFTchsJdcWJchTsch
NCqCttLZrCPQtNrtWqfhWJJqscmTJwsc
ZClvLCLmPjnPllPvCLrmnDRjpDzGpMRDRRDBGBgSzb
tvwCtDMQvJJPJtvQprjrjrvBjsTZTWTj
gFzgldFZSlSbgFlZmGmcFqsppjsLqrBsLBrqqWWjdB
FlcbhhNNbmHmcbSSzzggwDDQDwJnVCVHPtMVnnZQ
hrCnnrFrCvFHzVFdmmFm
GDTBsSfDDBRwfDsQbSdjHHVlqpmpgqWqpH
TBDBDBQBwcsPsPGQswPcZvJMrJhnrNhrNNnHJM
CztfzfZLBjMqZZWZgT
VPcblQhJvtgbvbgb
wwFQwVRPRchwcrJcPzfRpzspBfzfnSCzmt
FMnmnQnFNdQFRtmFmfNsCsjfpfrHHfVffV
DlLqDPwGlbVCdVbddbsr
GPDzLhqwLqDMFdFJRWzQzd
CSDSrMqnVSCTsPGPZpnPPGvP
jhBhhqBQQlhgjthBhlhJpLlwLLPwsswsGZpWPLvP
dgJQzgFjzjJFzzdHFzzzJMmNHCrSMSCSNbRqDCMCmR
cvSPvzWwzcTbVWSPbppWVjsGjdHdQSlNsQSdNGqsHZ
MRmCfmFBfRJfjqrdNMZHZQjQ
qgFtChDCFgmCnppPnczPbcLpnL
RllsdrhQvcVqmVzQcm
gGgnrZZMrFWFpZcccVmHqjVmHHnJ
ZrMWTTbbGMpbtgCTTZgZCWCLhwdsLvhhhPhNSldvPwPNfNlR
ffMqqznPPMzHfdfcdBJGTMVTGjRmMMTBjr
vtDwSwpmDsmQZswWSDhhDQGrjTgJBglRsjTTjVRBVTBl
ZthhQStwppSSvbvNDtWwnnbffmPnHPFHqmzFbLFq
CcHPmPcTJTqNCPqbqJqLgNJrjWtrftjrrnBnsWtjtBsfTB
ZRLwhzwLRlhLpdlpjftBBnBjWsBBvn
QhzhlwDdMzwFSwRLMJqqcSmqNPgmqNHNVP
WzTWppwcQNppbQrJHhhrJfcdfnsr
MDMLlLqjvqSBvVCLGJhnJsrDnnrDdhDffZ
BLMCBCBlLlGSJvSPBMLqGJVwwQzPpNRWmTRzmzpWWFmTbQ
WpWpWsfcBFjwGgqqtTQrTpgg
JLHNPPvLJRZdnNJZHRzGGTzjrtMqMJlQzztt
vHHnbDnLnHRCRnvdZdbHLNPfBfBhcffmcSSsDjcVwVBmcS
DDZlblRRLQcNpJNhpL
VPrdJfBFFBBWBrdvJPCBBdfhqcFhchNQcpNgzqcjphqFjp
mWVPfMWWfBMWWwPrWvJHDbZGZmZRtDbsDbSb
PDwwBzvRRzPCBPgnrwvvCDsSSccWscFTnSshWnZsSZcF
GJtNGHfLbQtQQJQGhhhShgSZWVWJjSFF
tmHlfGfMlBzrRDMggz
gSBNwDNJglSwlDMtTCsZzStTsSCC
hhfGdGcFhrqFmQddrhvvrdGRRtQMTHMCsbZbZtRTsbZsQs
mrmrFqqqccdhWjGcnLpBDWgNWpCBlgLW
WgmBsqMBnLLGnGnJtFgbbTwHttTwHF
cQjcfpVQfCCPSMjCcCPSPjVwbtTlTtwJbTvJJHbzHFFJ
PCZDCZffCdpQCdDWrGGsnLqWhnrM
gppVszSgMPMPstzNpPMQpnGfDJhfnGLLGnfLfQlLfh
rBFcCcrbmbJJJWhbhLVL
wqcmRFZqmcvvCZBcRvcVwNsztSPzHstSgzMNSgpS
qzLJRZfpRZtNNMSfftFN
QDnPHCCGvbQnnCwMMlcFgsgHFFlNlV
rPCMQnbdhRLqJLzhzB
dfdrfqBqBtRwBsFR
cDczzSMzDcSGSQbCfFjRFZtZCZmtwZRt
bVcJSbVbSDllNrrWWNdvWf
WSPPWlppCQlZPGqPjhcjfs
JJrJrRTHNTNLbbNLcfzzSfSzGTjsqZsj
FVRFNgVRbDbdwlWpSnvQnVQM
znJTCRCSvRpzVBjWJdBBBVNb
gggcfGDrGDZqwhwfGBjbHVSVdtdjtBShWj
ZrgmqmGDGfDPmrfwPmsqZPfCpsFFnFvlSMCLLvpSRFFMvL
qhhfgzzSGDSZSgfrcjhcjCCndnbjdr
FPTTTwBHBPJMJVJBGwmjvCmBdjjNNcrjncNc
GwTttMsTtHFtVFtDplSDzgRpDqsfpD
vzwsPlvFFdJGjQwdJw
HHNbpDTbVMvTpmMHvddtRtJJjjJRdLmLGj
HbqHcbMvlWrqzWFW
hMJMJBhPTnDMJJTGmmGmwDpRzRpFWz
lSZPPNvbNllPpGRFwwzRNGgm
bHZCZbvrttlZClqbHbsrbnQMThdJBQhVQBPdscnPQB
ZRNZfffHLfDLgfNlHWwhChWzzVdcVH
jpJmJjvnTtSjtJvQWldPWcBdPSdWzzcz
jGGsGsFFFGnJtTvvTszZNqqNgrsDLRDqLqrL
rrblpnfnVVfspgrppnMrpsrGdGdzgddzPFCjCzjzzzjtDC
TRWTJwThJhRvwZWvJBZvqDzQzGBPCzdHGjdGGGttzj
JSZmTZZwWvqhwqrrVnrLnPmbsbPr
MdhjZhZZDTdPDcgCSLfgCpCL
vvwtnwnssznwJnwvBbBBHHRSSfLLcpWfSWWzcLRTRWpf
snJtHJHmbBsrswNtsnjhlhqZPqTjjTjQMPGr
gmSnWMMzvvNWCNWCJJph
QfqjcbcRGGjcwhNppNqMptdNHL
rGPbflPfwPvlFFvTTMlg
trTdMJvtlLntbCRN
GBZsGFGBcRbZCRNR
SSGFmFjqVNFVssjSVjqjvMMQvgTmMgMMQWMmTdhJ
GcNcdNdwMZSqNZSSScSdqGwDrCmJMVrCmHmVVCFVJDrmFV
jTvsRsWbjjbQQfvTThFVZVTVDJVHlCFr
BjnBPfRWBnRsnvBsRBQQSSGzpZLdgwcLZqzgzPLg
clNrNpjbNpbRrCpsRlrVtjwVZwttttZVgMHwZS
FJBBDhJDTQFThqssvPJBBvHMWLwgwSHtWLZMwZgwSg
qQJfdJDhGsBBDFJBnlzGmmnRzbCpcrzl
ZPbfgBvcZPPZPWWWWBFbQllndnqdnlpwdSNfnwdN
LzLrzDhmDRRJpJzptDhCSCqHMHqnqSlHqMSQNHQS
zTsRzsDTJszzrrLRstrGJLsPpbVVPbcgTBcZvbPVFggbjP
THpVHSrLZrzzvPtJdtsqLssdLW
fbfCCQgQllWwwwFmjRsPcqcPsJJJdscPdmsP
RNQlQgCFfgwVppWTNvGrvn
PqFwwcqzDlFJDDQVMjQmMBjG
ZgTZZndCpBMVNTvvQc
pHgtZdtRnnLhcshdhWzWSFlbsJsqzzzbSb
zjfgjMhhgMJdfHQHWdVQvR
CrmpmpZpHQptHHHQ
CnwcFbNCqQBFwwFFsPslJgsjhMlMcDJP
HpnStLpnQnHnqQLQqpMSSWWZbswNcNqwbNsfwqGGZc
dVRRTCTVJNLcfJcJFb
gzjTRCddgLDdzdjCCrBjjdhhBnQPSSBhvlSBQvMhQMnt
lFTlwMwZlblSjrCpVvvsptspZpps
nHRPPnqnhPRqJHhqqhfdPqLCHvBCvvscvVNczztCCvsvtm
RJDghDhRhhGPPqGhsPhhFSbbwGSFjGQlWTrbwQbW
RRjgNPTRFhglgNNjTsmGqCCGZfzmHCnZGnZCqq
SppWLbtbCzZMpHMZ
dSDbbJdVVlHFNlll
dtZdGmqqtmzhtqZtZswzSnSjfNHNVjzCWCnCffHz
LgpMFMvlhvRMhhDDlvvQLFJCfSCHnFVJnSnJHNjSnj
rRBLcQcpQcrZbwsZshbs
"""


def puzzle_input() -> list[str]:
    """Return the bundled rucksack list, one rucksack per entry."""
    return _RUCKSACKS.split()


def example_input() -> list[str]:
    """Return the short worked example."""
    return list(_EXAMPLE)


def find_badge(first: str, second: str, third: str) -> str:
    """Return the first item of ``first`` that also appears in the other two."""
    for item in first:
        if item in second and item in third:
            return item
    raise ValueError(f"no common item in {first!r}, {second!r}, {third!r}")


def priority(item: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    offset = ord(item) - ord("A")
    if offset > 25:
        return ord(item) - ord("a") + 1
    return offset + 27


def badge_priority_sum(lines: Iterable[str]) -> int:
    """Sum the badge priorities of consecutive groups of three rucksacks."""
    rucksacks = list(lines)
    if len(rucksacks) % GROUP_SIZE:
        raise ValueError("the number of rucksacks is not a multiple of three")
    groups = zip(*[iter(rucksacks)] * GROUP_SIZE)
    return sum(priority(find_badge(*group)) for group in groups)


def part1(text: str) -> int:
    """Badge priority sum of the rucksacks in text, one per line."""
    return badge_priority_sum(line.strip() for line in text.splitlines() if line.strip())